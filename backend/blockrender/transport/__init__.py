from blockrender.transport.slack_client import SlackApiError, SlackClient

__all__ = ["SlackApiError", "SlackClient"]
