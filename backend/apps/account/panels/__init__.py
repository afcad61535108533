"""
Account panels - one module per sidebar entry, auto-discovered.
"""
