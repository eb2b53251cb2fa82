# resonance/api/auth/__init__.py
