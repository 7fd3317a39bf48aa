from oauth_helper.settings.config import LoggingSettings, OAuthSettings, Settings, get_settings

__all__ = ["LoggingSettings", "OAuthSettings", "Settings", "get_settings"]
