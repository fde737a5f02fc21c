"""Spotify API URLs, request limits and client defaults."""

# Spotify Auth
SPOTIFY_AUTHORIZE_URL = "https://accounts.spotify.com/authorize"
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"

# Spotify Web API base
SPOTIFY_API_BASE = "https://api.spotify.com/v1"

# Spotify Web API endpoints
ALBUMS_URL = f"{SPOTIFY_API_BASE}/albums"
ARTISTS_URL = f"{SPOTIFY_API_BASE}/artists"
AUDIO_ANALYSIS_URL = f"{SPOTIFY_API_BASE}/audio-analysis"
AUDIO_FEATURES_URL = f"{SPOTIFY_API_BASE}/audio-features"
BROWSE_URL = f"{SPOTIFY_API_BASE}/browse"
EPISODES_URL = f"{SPOTIFY_API_BASE}/episodes"
ME_URL = f"{SPOTIFY_API_BASE}/me"
PLAYLISTS_URL = f"{SPOTIFY_API_BASE}/playlists"
RECOMMENDATIONS_URL = f"{SPOTIFY_API_BASE}/recommendations"
SEARCH_URL = f"{SPOTIFY_API_BASE}/search"
SHOWS_URL = f"{SPOTIFY_API_BASE}/shows"
TRACKS_URL = f"{SPOTIFY_API_BASE}/tracks"
USERS_URL = f"{SPOTIFY_API_BASE}/users"

# Request limits enforced locally before dispatch
MAX_ALBUM_IDS = 20
MAX_ARTIST_IDS = 50
MAX_EPISODE_IDS = 50
MAX_SHOW_IDS = 50
MAX_TRACK_IDS = 50
MAX_AUDIO_FEATURES_IDS = 100
MAX_LIBRARY_IDS = 50
MAX_FOLLOW_IDS = 50
MAX_PLAYLIST_FOLLOWER_IDS = 5
MAX_PLAYLIST_URIS = 100
MAX_PAGE_LIMIT = 50
MAX_PLAYLIST_TRACKS_LIMIT = 100
MAX_RECOMMENDATIONS_LIMIT = 100
MAX_RECOMMENDATION_SEEDS = 5
MAX_SEARCH_OFFSET = 2000
MAX_PLAYLISTS_OFFSET = 100_000

# Client defaults
DEFAULT_LIMIT = 20
DEFAULT_CONCURRENCY_LIMIT = 5
DEFAULT_REQUEST_TIMEOUT = 30.0  # seconds
DEFAULT_TOKEN_EXPIRY_BUFFER_SECONDS = 60

# Caller-side retry defaults (see spotify_catalog.retry)
DEFAULT_MAX_RETRIES = 3
DEFAULT_RETRY_BASE_DELAY = 1.0  # seconds

# ApiError.status used when no HTTP response was received
TRANSPORT_ERROR_STATUS = 0
