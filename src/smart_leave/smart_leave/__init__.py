"""Smart Leave package.

Organized by feature modules (users, requests, feedback, reports) with a thin
console/Flask layer on top of in-memory service/repository layers.
"""
