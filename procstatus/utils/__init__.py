"""Shared helpers for procstatus."""
