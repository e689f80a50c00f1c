# corbusier

Core building blocks for orchestrating AI agents: a canonical message
format shared by every agent backend, layered validation of messages at
ingestion boundaries, and versioned events whose stored schema can be
upgraded on read. The package has no dependencies outside the standard
library.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is in the package

| Module | Contents |
| --- | --- |
| `corbusier.ids` | `MessageId`, `ConversationId`, `TurnId` (UUID-backed identifiers) and `SequenceNumber` |
| `corbusier.role` | `Role`: `USER`, `ASSISTANT`, `TOOL`, `SYSTEM` |
| `corbusier.content` | `TextPart`, `ToolCallPart`, `ToolResultPart`, `AttachmentPart`, `content_part_to_dict`, `content_part_from_dict` |
| `corbusier.metadata` | `MessageMetadata`, `SlashCommandExpansion` |
| `corbusier.message` | `Message`, `MessageBuilder`, `MessageBuilderError` |
| `corbusier.clock` | `Clock`, `SystemClock`, and `FixedClock` for deterministic timestamps |
| `corbusier.validator` | `ValidationConfig` (default, `lenient()`, `strict()`) and the abstract `MessageValidator` |
| `corbusier.rules` | The individual validation rules, e.g. `validate_message_id`, `validate_message_size` |
| `corbusier.service` | `DefaultMessageValidator` |
| `corbusier.repository` | The abstract, asynchronous `MessageRepository` interface |
| `corbusier.event` | `VersionedEvent`, `EventMetadata` |
| `corbusier.upgrader` | `EventUpgrader`, `MessageCreatedUpgrader`, `UpgraderRegistry` |
| `corbusier.errors` | `ValidationError`, `RepositoryError`, `SchemaUpgradeError` and their subclasses |
| `corbusier.cli` | `main`, the `corbusier` command |

## Building and validating a message

Messages are immutable and must carry at least one content part;
`Message.create` and `MessageBuilder.build` raise `MessageBuilderError`
when there is none. Both take an optional `Clock` for the `created_at`
timestamp and fall back to `SystemClock` when it is omitted.

```python
from corbusier.clock import SystemClock
from corbusier.content import TextPart, ToolCallPart
from corbusier.ids import ConversationId, SequenceNumber
from corbusier.message import Message
from corbusier.metadata import MessageMetadata
from corbusier.role import Role
from corbusier.service import DefaultMessageValidator

clock = SystemClock()
conversation = ConversationId.new()

message = (
    Message.builder(conversation, Role.ASSISTANT, SequenceNumber(2))
    .with_content(TextPart("Let me read that file for you."))
    .with_content(ToolCallPart("call-001", "read_file", {"path": "src/main.py"}))
    .with_metadata(MessageMetadata.for_agent("claude"))
    .build(clock)
)

DefaultMessageValidator().validate(message)  # returns the message when it passes
```

Validation collects every problem it finds instead of stopping at the
first. A single failure is raised as its own error type (for example
`InvalidContentPartError`, `TooManyContentPartsError` or
`MessageTooLargeError`); several failures are raised together as
`MultipleValidationErrors`, whose `errors()` lists each one.

```python
from corbusier.errors import ValidationError

try:
    DefaultMessageValidator().validate(
        Message.create(conversation, Role.USER, [TextPart("   ")], SequenceNumber(1), clock)
    )
except ValidationError as error:
    print(error)  # invalid content part at index 0: text content cannot be empty
```

Limits come from `ValidationConfig`: by default 1 MiB per message
serialised as compact JSON, 100 content parts, 100 000 characters per
text part, and no empty or whitespace-only text.
`ValidationConfig.lenient()` allows empty text;
`ValidationConfig.strict()` lowers the limits to 256 KiB, 20 parts and
10 000 characters. Pass a config with
`DefaultMessageValidator(config=...)`.

Messages round-trip through JSON with `to_json()` / `Message.from_json()`
and through plain dictionaries with `to_dict()` / `Message.from_dict()`;
loading malformed data raises `ValueError`.

## Upgrading stored events

Events are stored with an explicit schema version. The registry picks
the upgrader for an event's type and brings the event to the current
version; `MessageCreated` events move from version 1 to version 2 by
gaining an empty `metadata` object when they lack one.

```python
from corbusier.event import VersionedEvent
from corbusier.upgrader import UpgraderRegistry

registry = UpgraderRegistry.with_defaults()
event = VersionedEvent.create(1, "MessageCreated", {"id": "123"}, SystemClock())
upgraded = registry.upgrade(event)
assert upgraded.version == 2
```

`UpgraderRegistry()` on its own is empty; add upgraders with
`register(event_type, upgrader)`. An event type with no registered
upgrader raises `UnknownEventTypeError`; a version the upgrader does not
know raises `UnsupportedVersionError`; data that is not an object raises
`MalformedDataError`.

## Command line

```
corbusier
```

prints a greeting and exits.

## What the package does not do

- It stores nothing. `MessageRepository` only defines the asynchronous
  interface (`store`, `find_by_id`, `find_by_conversation`,
  `next_sequence_number`, `exists`); no database or in-memory
  implementation is included.
- It does not talk to any agent backend or run tools; it models and
  checks the messages exchanged with them.
- The `corbusier` command has no further functions beyond its greeting.