"""
Party read/delete endpoints.
"""
