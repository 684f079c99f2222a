"""Central constants for the match_json project."""

# Element names of the match-result response
ENVELOPE_KEY = "Response"
RESULT_BLOCK = "ResultBlock"
MATCH_DETAILS = "MatchDetails"
MATCH = "Match"
SCORE = "Score"
MATCH_SUMMARY = "MatchSummary"
TOTAL_MATCH_SCORE = "TotalMatchScore"

# Config files are read as UTF-8; a BOM written by Windows editors is tolerated
CONFIG_ENCODING = "utf-8-sig"

DEFAULT_ENV = "dev"
