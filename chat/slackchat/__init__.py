"""slackchat: Slack mrkdwn rendering for terminal chat clients."""
