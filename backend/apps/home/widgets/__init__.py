"""
Home widgets - one module per dashboard section, auto-discovered.
"""
