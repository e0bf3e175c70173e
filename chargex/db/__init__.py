"""
Database integrations for chargex.
"""
