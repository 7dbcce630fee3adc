"""
Configuration constants and settings for morningpost.
"""

# Hacker News API settings
HN_API_BASE_URL = "https://hacker-news.firebaseio.com"
HN_NEWEST_STORIES_ENDPOINT = "/v0/newstories.json"
HN_ITEM_ENDPOINT = "/v0/item/{}.json"

# HTTP settings
DEFAULT_USER_AGENT = "morningpost/0.1.0 (+https://github.com/HackerNews/API)"
REQUEST_TIMEOUT = 10  # seconds

# Summary settings
STORY_WINDOW = 10
SUMMARY_HEADER = "Latest HackerNews Stories"
