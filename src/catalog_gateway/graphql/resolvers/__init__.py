"""Resolver functions referenced by the GraphQL types, queries and mutations.

Each resolver issues at most one upstream call through the TrackAPI on the
request context.
"""
