# rmwcore

Plain Python data types for a robotics middleware interface. The package
needs only the standard library.

## Contents

- **Return codes** (`rmwcore.ret`)
  - `Ret` holds the middleware return codes and `RcutilsRet` holds the utility-layer codes.
  - `convert_rcutils_ret` maps a utility code to a middleware code. `OK`, `INVALID_ARGUMENT`, `BAD_ALLOC` and `ERROR` map one to one. Every other code maps to `Ret.ERROR`.
  - `raise_for_ret` does nothing for `Ret.OK`. For `Ret.INVALID_ARGUMENT` it raises `InvalidArgumentError`, for `Ret.BAD_ALLOC` it raises `BadAllocError`, and for any other code it raises `RmwError`.
  - Each exception carries the code in its `ret` attribute.
  - `InvalidArgumentError` is also a `ValueError`, and `BadAllocError` is also a `MemoryError`.
- **Discovery options** (`rmwcore.discovery_options`)
  - `DiscoveryOptions` holds an `AutomaticDiscoveryRange` and a list of static peer addresses. `zero_initialized_discovery_options()` creates an empty one.
  - `init(size)` creates `size` empty peer slots. If no range is set, it sets the range to `LOCALHOST`. It raises `InvalidArgumentError` if peers are already present or if `size` is negative.
  - `copy()` returns an independent copy. Peer addresses longer than 255 characters are cut to 255.
  - `fini()` resets the options to the empty state.
  - Two options compare equal when their ranges are equal and their peer lists are equal.
- **Events** (`rmwcore.event`)
  - `EventType` lists the event kinds. `Event` holds an implementation identifier, a data payload and an event type.
  - `zero_initialized_event()` returns an event with no identifier, no data and type `EventType.INVALID`. `Event.fini()` resets an event to that state.
- **Message sequences** (`rmwcore.message_sequence`)
  - `MessageSequence` and `MessageInfoSequence` are bounded containers.
  - `init(size)` sets the capacity and empties the container. `append(item)` adds an item and raises `RmwError` once the capacity is reached. `fini()` drops the items and the capacity.
  - Both support `len()`, iteration and indexing.
- **QoS** (`rmwcore.qos`)
  - The policy enums are `HistoryPolicy`, `ReliabilityPolicy`, `DurabilityPolicy` and `LivelinessPolicy`.
  - `QoSDuration` holds a duration in seconds and nanoseconds, and `QoSProfile` is a frozen profile.
  - `QoSCompatibility` lists the possible results of a compatibility check.
  - The predefined profiles are `SENSOR_DATA`, `PARAMETERS`, `DEFAULT`, `SERVICES_DEFAULT`, `PARAMETER_EVENTS`, `SYSTEM_DEFAULT`, `BEST_AVAILABLE` and `UNKNOWN`.
- **Init options** (`rmwcore.init_options`)
  - `InitOptions` and `LocalhostOnly` describe the init options. `zero_initialized_init_options()` returns options with default values.
  - `InitOptions.is_zero_initialized()` reports whether the options are still in that state.
- **Context** (`rmwcore.context`)
  - `Context` holds the state of one init/shutdown cycle, and `zero_initialized_context()` returns an empty one.
- **Namespace validation** (`rmwcore.validate_namespace`)
  - `validate_namespace(namespace)` returns a `NamespaceValidationResult`. It has a `result` field, which is a `NamespaceValidation` code, an `invalid_index` field and a `valid` property.
  - The length limit is checked last. A `None` argument raises `InvalidArgumentError`.
  - `namespace_validation_result_string(code)` describes a code. It returns `None` for `VALID`.

## Install

```
pip install .
```

To run the tests, install the test extra and then run pytest:

```
pip install ".[test]"
pytest
```

## Example

```python
from rmwcore.validate_namespace import (
    NamespaceValidation,
    namespace_validation_result_string,
    validate_namespace,
)

outcome = validate_namespace("/repeated//slashes")
assert outcome.result is NamespaceValidation.INVALID_CONTAINS_REPEATED_FORWARD_SLASH
assert outcome.invalid_index == 10
print(namespace_validation_result_string(outcome.result))

assert validate_namespace("/ok").valid
assert namespace_validation_result_string(NamespaceValidation.VALID) is None
```

```python
from rmwcore.discovery_options import (
    AutomaticDiscoveryRange,
    zero_initialized_discovery_options,
)

options = zero_initialized_discovery_options()
options.init(2)
assert options.automatic_discovery_range is AutomaticDiscoveryRange.LOCALHOST
clone = options.copy()
assert clone == options
options.fini()
```

## What it does not do

This package has data types and validation only. It does not include:

- a middleware implementation
- networking
- nodes, publishers, subscriptions, services or wait sets
- event taking
- a function that checks the compatibility of two QoS profiles
- validation of topic or node names
- a command-line tool