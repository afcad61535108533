"""
App Home - app-specific configuration.
"""
APP_ID = "home"
URL_PREFIX = "/app"

DASHBOARD_META_KEY = "guestify_home_dashboard"
GOAL_META_KEY = "guestify_current_goal"

GOAL_BUTTONS = [
    {"goal": "build_authority", "label": "Build Authority", "icon": "fa-solid fa-crown"},
    {"goal": "grow_revenue", "label": "Grow Revenue", "icon": "fa-solid fa-dollar-sign"},
    {"goal": "launch_promote", "label": "Launch & Promote", "icon": "fa-solid fa-rocket"},
]
