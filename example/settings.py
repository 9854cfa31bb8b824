# Visit keys without constraints between them in ascending order
SORT_KEYS = True

# Container type used when a data file does not specify one
# CONTAINER = "dict"

# Print results as yaml instead of the compact default
OUTPUT_FORMAT = "yaml"
