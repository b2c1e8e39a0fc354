# Semantic version of the package (bump this when you publish a new release)
VERSION = "0.1.0"
