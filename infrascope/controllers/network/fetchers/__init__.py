"""Network fetchers."""

from infrascope.controllers.network.fetchers.route_fetcher import RouteFetcher
from infrascope.controllers.network.fetchers.subnet_fetcher import SubnetFetcher

__all__ = ["RouteFetcher", "SubnetFetcher"]
