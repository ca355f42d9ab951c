"""
Configuration layer: defaults, settings.yaml loading and validation.

Also ships the bundled criteria definitions catalogue (criteria.yaml).
"""
