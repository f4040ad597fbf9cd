"""Routing — templated URL patterns compiled into matchers and builders.

Each Route compiles its pattern once, at construction, into an immutable
regex and build procedure. A Router holds routes in order.
"""
