"""EngClass Manager package.

This package is organized by feature modules (classes, students, attendance,
billing, dashboard) with a thin Flask controller layer over service and
repository layers backed by a document record store.
"""
