"""
Tagged message variants and the closed families they belong to.

A message is a frozen dataclass with a stable ``TAG``. A MessageFamily is the
closed set of variants one side of the wire may send. Each family resolves
only its own tags, so a client command can never decode as a server event.
"""

from typing import Any, ClassVar, Iterator, Optional, TypeVar

from ..codec.fields import decode_fields, encode_fields
from ..config.defaults import DEFAULT_CODEC_OPTIONS, CodecOptions
from ..errors import MissingFieldError, TypeMismatchError, UnknownVariantError

TAG_KEY = "type"

M = TypeVar("M", bound="MessageVariant")


class MessageVariant:
    """Base class for one variant of a tagged message union."""

    TAG: ClassVar[str]
    LEGACY_TAGS: ClassVar[tuple[str, ...]] = ()

    def to_dict(self) -> dict[str, Any]:
        """Convert to a tagged dictionary: discriminator first, then fields."""
        return {TAG_KEY: self.TAG, **encode_fields(self)}

    def to_json(self) -> str:
        """Serialize to JSON wire text."""
        from ..codec.json_codec import encode
        return encode(self)

    @classmethod
    def accepted_tags(cls, options: CodecOptions = DEFAULT_CODEC_OPTIONS) -> tuple[str, ...]:
        """Tags this variant decodes from."""
        if options.accept_legacy_aliases:
            return (cls.TAG,) + cls.LEGACY_TAGS
        return (cls.TAG,)

    @classmethod
    def from_fields(cls: type[M], data: dict[str, Any],
                    options: CodecOptions = DEFAULT_CODEC_OPTIONS) -> M:
        """Build from a tagged object whose tag has already been resolved."""
        return cls(**decode_fields(cls, data, options, reserved=(TAG_KEY,)))

    @classmethod
    def from_dict(cls: type[M], data: dict[str, Any], *,
                  options: CodecOptions = DEFAULT_CODEC_OPTIONS) -> M:
        """
        Create from a tagged dictionary whose tag must name this variant.

        Raises:
            DecodeError: If the tag or any field does not match this variant
        """
        tag = read_tag(data)
        if tag not in cls.accepted_tags(options):
            raise UnknownVariantError(
                f"Tag '{tag}' does not name {cls.__name__}",
                tag=tag,
                family=cls.__name__,
            )
        return cls.from_fields(data, options)

    @classmethod
    def from_json(cls: type[M], text: str | bytes, *,
                  options: CodecOptions = DEFAULT_CODEC_OPTIONS) -> M:
        """Deserialize wire text that must encode this variant."""
        from ..codec.json_codec import parse_text
        return cls.from_dict(parse_text(text), options=options)


def read_tag(data: Any) -> str:
    """
    Extract the discriminator from a decoded wire object.

    Raises:
        TypeMismatchError: If the message is not an object or the tag not a string
        MissingFieldError: If the discriminator is absent
    """
    if not isinstance(data, dict):
        actual = "null" if data is None else type(data).__name__
        raise TypeMismatchError(f"Message must be a JSON object, got {actual}",
                                expected="object", actual=data)
    if TAG_KEY not in data:
        raise MissingFieldError(f"Missing discriminator field '{TAG_KEY}'",
                                path=TAG_KEY, field_name=TAG_KEY)
    tag = data[TAG_KEY]
    if not isinstance(tag, str):
        actual = "null" if tag is None else type(tag).__name__
        raise TypeMismatchError(f"Discriminator '{TAG_KEY}' must be a string, got {actual}",
                                path=TAG_KEY, expected="string", actual=tag)
    return tag


class MessageFamily:
    """Closed registry of the variants one side of the wire may send."""

    def __init__(self, name: str, variants: list[type[MessageVariant]]):
        self.name = name
        self.variants: tuple[type[MessageVariant], ...] = tuple(variants)
        self._by_tag: dict[str, type[MessageVariant]] = {}
        self._by_legacy_tag: dict[str, type[MessageVariant]] = {}

        for variant in self.variants:
            self._register(variant.TAG, variant, self._by_tag)
            for legacy in variant.LEGACY_TAGS:
                self._register(legacy, variant, self._by_legacy_tag)

    def _register(self, tag: str, variant: type[MessageVariant],
                  table: dict[str, type[MessageVariant]]) -> None:
        # Tags are never reused, not even across canonical and legacy names
        if tag in self._by_tag or tag in self._by_legacy_tag:
            raise ValueError(f"Duplicate tag '{tag}' in {self.name} messages")
        table[tag] = variant

    def __iter__(self) -> Iterator[type[MessageVariant]]:
        return iter(self.variants)

    def __contains__(self, item: Any) -> bool:
        return item in self.variants or type(item) in self.variants

    def __repr__(self) -> str:
        return f"MessageFamily({self.name!r}, tags={self.tags})"

    @property
    def tags(self) -> tuple[str, ...]:
        """Canonical tags in registration order."""
        return tuple(variant.TAG for variant in self.variants)

    def resolve(self, tag: str, options: CodecOptions = DEFAULT_CODEC_OPTIONS) -> type[MessageVariant]:
        """
        Look up the variant class for a tag.

        Raises:
            UnknownVariantError: If no variant of this family uses the tag
        """
        variant: Optional[type[MessageVariant]] = self._by_tag.get(tag)
        if variant is None and options.accept_legacy_aliases:
            variant = self._by_legacy_tag.get(tag)
        if variant is None:
            raise UnknownVariantError(
                f"Unknown {self.name} message type '{tag}'",
                tag=tag,
                family=self.name,
            )
        return variant

    def from_dict(self, data: Any, options: CodecOptions = DEFAULT_CODEC_OPTIONS) -> MessageVariant:
        """Decode an already-parsed wire object into a variant of this family."""
        tag = read_tag(data)
        return self.resolve(tag, options).from_fields(data, options)
