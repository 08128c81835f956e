"""View rendering module.

The success page is rendered from a Jinja2 template; error bodies are small
JSON documents. Both live here, separate from the router.
"""
