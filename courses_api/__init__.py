"""Courses REST API: users and the courses they own, behind HTTP Basic auth."""
