"""Tweakwise frontend service.

Injects Tweakwise search and navigation configuration into storefront
page renders, keyed by sales channel domain.
"""
