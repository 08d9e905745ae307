"""Resolver package for the GraphQL schema.

Functions here are referenced by the GraphQL types, queries and mutations.
Each one reads or writes the store found in the request context.
"""
