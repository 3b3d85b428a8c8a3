"""
A small blog backend: user accounts and articles behind a JSON HTTP API.

Quick start:

.. code-block:: bash

   export JWT_SECRET=...                  # at least 32 characters
   export SQLALCHEMY_DATABASE_URI=sqlite:///blog.db
   python -m blog_api

Mutating endpoints take a bearer token obtained from ``POST /users/login``.
See :mod:`blog_api.routes` for the full list.
"""
