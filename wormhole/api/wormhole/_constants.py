"""Constants for wormhole pointers (private)."""

# Reserved systemSpec value meaning "never set"; distinct from ""
SPEC_UNSET = "<spec-unset>"

# componentURIString written when the target node cannot be found
MISSING_TARGET_NODE = "NOTFOUND"

# Names of the target map resolver strategies, in the order they are tried
STRATEGY_IN_SITU = "in_situ"
STRATEGY_RELATIVIZE_TO_SOURCE = "relativize_to_source"
STRATEGY_RESOLVE_AGAINST_SOURCE_PARENT = "resolve_against_source_parent"
STRATEGY_SAME_FOLDER_BY_NAME = "same_folder_by_name"
STRATEGY_SEARCH_SUBFOLDERS = "search_subfolders"
STRATEGY_SEARCH_ANCESTORS = "search_ancestors"
