"""Domain layer for ledgerload application.

Services live in their own modules (ledgerload.domain.account and so on) and
are imported from there. The database layer imports domain entities and the
services import the database layer, so this package re-exports nothing.
"""
