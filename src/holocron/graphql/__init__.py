"""
GraphQL API
"""
