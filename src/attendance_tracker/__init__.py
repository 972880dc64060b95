"""Attendance Tracker package.

Organized by feature modules (departments, employees, attendance, ...) with a
thin Flask controller layer on top of service/repository layers.
"""
