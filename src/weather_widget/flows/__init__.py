"""Prefect flows.

- build.py - build_widget: resolve -> fetch -> render -> site/index.html
"""
