# Moodboard engine: aesthetic detection and multi-provider content ranking
