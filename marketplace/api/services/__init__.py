# Services hold the SQL and business rules behind each router.
