"""Typed shapes produced by config accessors."""

from dirconfig.entity.userinfo import Userinfo

__all__ = ["Userinfo"]
