"""Resolver package for the GraphQL schema.

Each resolver issues exactly one call against the store found in the request
context and converts the returned record into its GraphQL type.
"""
