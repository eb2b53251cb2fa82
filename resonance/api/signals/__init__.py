# resonance/api/signals/__init__.py
