"""
Services Package

Business logic that is:
- Separate from HTTP handling (routers)
- Written against repositories, not raw queries
- Easy to test in isolation with a plain Session

Services raise bookstore.exceptions errors and own the commit of each
unit of work.

Current services:
- authors.py: Author create/read/delete
- publishers.py: Publisher create/read/delete
- tags.py: Tag create/read/delete
- books.py: Book creation, inventory, price adjustment, deletion, search
- validation.py: Shared blank/ISBN checks
- rate_limiter.py: Rate limiting with slowapi
"""
