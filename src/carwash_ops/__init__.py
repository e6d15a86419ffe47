"""Carwash & carpet-cleaning operations package.

This package is organized by feature modules (customers, employees,
attendance, carpets, ...) with a thin Flask controller layer on top of
service/repository layers backed by a key-value store.
"""
