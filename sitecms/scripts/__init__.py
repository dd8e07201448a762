"""
One-shot maintenance scripts (``sitecms-create-admin``, ``sitecms-seed``).
"""
