# resonance/services/__init__.py
