from .remote_data import (
    RemoteData, NotAsked, Loading, Failure, Success, State,
    not_asked, loading, fail, succeed, state,
    is_not_asked, is_loading, is_failure, is_success,
    map, map_error, map_both, map2, map3, and_map, chain, unwrap, unpack, fold,
)
from .conversions import (
    to_option, from_option, to_optional, from_optional, to_result, from_result, from_list,
)
from .option import Option, Some, Nothing
from .result import Result, Ok, Err
from .fetch import attempt, fetch
from .codec import encode, decode

__all__ = [
    "RemoteData", "NotAsked", "Loading", "Failure", "Success", "State",
    "not_asked", "loading", "fail", "succeed", "state",
    "is_not_asked", "is_loading", "is_failure", "is_success",
    "map", "map_error", "map_both", "map2", "map3", "and_map", "chain",
    "unwrap", "unpack", "fold",
    "to_option", "from_option", "to_optional", "from_optional",
    "to_result", "from_result", "from_list",
    "Option", "Some", "Nothing", "Result", "Ok", "Err",
    "attempt", "fetch", "encode", "decode",
]
