from typing import assert_never

import pytest

from typical import Matching, all_of


class ChainFactory:
    """Build left-nested ``&`` chains, the shape produced by ``a & b & c ...``."""

    @staticmethod
    def make_chain(depth: int) -> Matching[int]:
        chain = Matching[int](lambda n: n >= 0)
        for i in range(depth):
            chain = chain & Matching[int](lambda n, i=i: n != -i - 1)
        return chain


class AggregateFactory:
    """Build the same conjunction as one flat ``all_of``."""

    @staticmethod
    def make_chain(depth: int) -> Matching[int]:
        members = [Matching[int](lambda n: n >= 0)]
        members.extend(Matching[int](lambda n, i=i: n != -i - 1) for i in range(depth))
        return all_of(*members)


@pytest.fixture(params=["chain", "aggregate"], ids=["Chain", "Aggregate"])
def factory(request):
    match request.param:
        case "chain":
            return ChainFactory()
        case "aggregate":
            return AggregateFactory()
        case _:
            assert_never(request.param)
