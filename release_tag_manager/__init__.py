"""Reconciles GitHub releases for tags requested through release builds."""
