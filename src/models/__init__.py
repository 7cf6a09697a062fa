"""
Data Models Module
----------------
Contains Pydantic models for data validation and serialization.
Defines the campground form inputs, the author snapshot and the caller identity.
"""
