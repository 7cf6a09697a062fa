"""
API Module
---------
Serves the campgrounds website using FastAPI.
Features include:
- Listing and showing campgrounds with their comments
- Creating campgrounds for logged-in users
- Editing and deleting campgrounds for their authors
- Flash messages and friendly not-found and error pages
"""
