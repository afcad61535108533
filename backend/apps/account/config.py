"""
Account Settings - app-specific configuration.
"""
APP_ID = "account"
URL_PREFIX = "/account"

DEFAULT_PANEL = "general"

# Usermeta keys written by the billing, team and profile services
PROFILE_META_KEY = "guestify_account_profile"
BILLING_META_KEY = "guestify_billing"
USAGE_META_KEY = "guestify_usage"
TEAM_MEMBERS_META_KEY = "guestify_team_members"
PENDING_INVITATIONS_META_KEY = "guestify_pending_invitations"
NOTIFICATION_PREFS_META_KEY = "guestify_notification_prefs"
API_KEY_META_KEY = "guestify_api_key"
