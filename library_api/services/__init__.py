"""
Services Package

This package contains the query and business logic used by the routers:
- Separate from HTTP handling (routers)
- Easier to test in isolation (they only need a Session)

Current services:
- authors.py: Author creation and author -> books view
- books.py: Book CRUD and author linking
- publishers.py: Publisher listing, creation rules, deletion, aggregate view
"""
