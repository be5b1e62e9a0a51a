from hypothesis.strategies import builds, integers, just, one_of, text

from remotedata import Failure, Loading, NotAsked, Success


not_asked = just(NotAsked())
loading = just(Loading())
failures = builds(Failure, text(min_size=1))
successes = builds(Success, integers())
pending = one_of(not_asked, loading)
remote_data = one_of(not_asked, loading, failures, successes)
