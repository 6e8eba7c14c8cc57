"""
Enum-driven dispatch over a closed set of variants.

Widget themes and widget schemes both select a named configuration from a
closed enum and run exactly one handler for it. This dispatcher holds the
enum-to-handler table and refuses to be built unless every member has a
handler, so a dispatch can never miss.

Example:
    class Flavor(Enum):
        PLAIN = "plain"
        FANCY = "fancy"

    dispatcher = EnumDispatcher(Flavor, {
        Flavor.PLAIN: use_plain,
        Flavor.FANCY: use_fancy,
    })
    dispatcher.dispatch(Flavor.FANCY, registry)
"""

from enum import Enum
from typing import Any, Callable, Dict, Generic, List, Type, TypeVar
import logging

logger = logging.getLogger(__name__)

# Type variable for the variant enum
VariantEnum = TypeVar('VariantEnum', bound=Enum)


class EnumDispatcher(Generic[VariantEnum]):
    """
    Total mapping from enum members to handlers.

    The handler table is validated once at construction: it must cover
    every member of the enum and nothing else.
    """

    def __init__(self, enum_type: Type[VariantEnum], handlers: Dict[VariantEnum, Callable]):
        """
        Initialize the dispatcher with its handler table.

        Args:
            enum_type: The closed enum being dispatched on
            handlers: Dictionary mapping every enum member to a handler

        Raises:
            ValueError: If a member lacks a handler or a key is not a member
        """
        missing = [member for member in enum_type if member not in handlers]
        if missing:
            raise ValueError(
                f"{enum_type.__name__}: No handler registered for {[m.name for m in missing]}"
            )
        foreign = [key for key in handlers if not isinstance(key, enum_type)]
        if foreign:
            raise ValueError(f"{enum_type.__name__}: Handlers for non-members {foreign}")

        self.enum_type = enum_type
        self._handlers: Dict[VariantEnum, Callable] = dict(handlers)
        logger.debug(f"{enum_type.__name__}: Registered {len(handlers)} handlers")

    def dispatch(self, variant: VariantEnum, *args, **kwargs) -> Any:
        """
        Run the handler registered for a variant.

        Args:
            variant: Enum member selecting the handler
            *args: Positional arguments forwarded to the handler
            **kwargs: Keyword arguments forwarded to the handler

        Returns:
            Result from the handler
        """
        member = self.enum_type(variant)
        logger.debug(f"{self.enum_type.__name__}: Dispatching to {member.name} handler")
        handler = self._handlers[member]
        return handler(*args, **kwargs)

    def handler_for(self, variant: VariantEnum) -> Callable:
        return self._handlers[self.enum_type(variant)]

    def get_registered_variants(self) -> List[VariantEnum]:
        """List of all variants with a registered handler, in enum order."""
        return [member for member in self.enum_type if member in self._handlers]
