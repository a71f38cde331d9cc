"""
Candidate CRUD endpoints.
"""
