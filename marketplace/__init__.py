"""
Package marker for the freelance marketplace service.
It groups the HTTP API and the shared persistence helpers under one import path.
Most functionality lives in the `api` and `common` subpackages.
"""
