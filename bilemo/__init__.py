"""
BileMo multi-tenant catalogue API.
"""
