# resonance/api/__init__.py
