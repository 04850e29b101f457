"""Shared helpers.

- dms: degrees-minutes-seconds coordinate tokens
"""
