"""Employee Store package.

Feature modules (employees, ...) sit on top of a thin database layer.
Flask controllers only translate HTTP to service calls; the rules live in
services and repositories.
"""
