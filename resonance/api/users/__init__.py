# resonance/api/users/__init__.py
