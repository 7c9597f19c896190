"""Utility helpers for nscache."""
