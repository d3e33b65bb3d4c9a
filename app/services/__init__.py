"""
Core operations. Every function takes the SQLAlchemy session as its first
argument and raises ``app.exceptions`` errors on failure.
"""
