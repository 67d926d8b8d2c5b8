"""Network domain: subnets and routes."""

from infrascope.controllers.network.controller import NetworkController

__all__ = ["NetworkController"]
