"""Last.fm endpoint URLs and method names."""

# Audioscrobbler web service
LASTFM_API_BASE = "http://ws.audioscrobbler.com/2.0"

# Website player endpoints (not part of the public API)
LASTFM_WEB_BASE = "https://last.fm"
USER_RECOMMENDED_URL = f"{LASTFM_WEB_BASE}/player/station/user/{{user}}/recommended"

# API methods
TRACK_GET_SIMILAR = "track.getsimilar"

# Response format requested from the API
RESPONSE_FORMAT = "json"
