"""
Service layer abstraction.

Services own all SQL.  API handlers never touch the database
directly; they receive a service bound to the shared ``Database``.
"""
