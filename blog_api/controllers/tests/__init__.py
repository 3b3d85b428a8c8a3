"""Tests for :mod:`blog_api.controllers`."""
