FEATURE = 'Feature'
FEATURE_COLLECTION = 'FeatureCollection'

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "https://localhost:5173",
    "http://localhost:3000",
    "https://localhost:3000",
]
