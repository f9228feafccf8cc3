"""Infrastructure modules for the translation resolver.

Components:
- i18n: Translation resolution, listings and client side export
- hookspecs: Plugin hook specifications
- services: Singleton providers and plugin managers
"""
