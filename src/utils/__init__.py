"""
Utilities Module
--------------
Helpers for turning campground names into URL-safe slugs.
"""
