"""
Service layer abstraction.

Services encapsulate business logic so that API handlers stay thin.
The in‑memory ``UserDirectory`` could be swapped for a database
backed implementation without changing the routes.
"""
