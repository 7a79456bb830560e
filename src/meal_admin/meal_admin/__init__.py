"""Meal Admin Dashboard package.

Organized by feature modules (employees, meal_requests, meals, users, ...)
with a thin Flask controller layer over service modules that talk to the
remote meal-management backend through a typed API client.
"""
