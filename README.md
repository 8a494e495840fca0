# edgeboot

Building blocks for bootstrapping a service: a small thread-safe
dependency-injection container and the typed configuration records a service
works with at start-up.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The container

`edgeboot.di.Container` maps names to constructors. A constructor receives a
`get` callable so that it can look up the services it depends on. Each service
is built on its first lookup and the same instance is returned afterwards; an
unknown name gives `None`. A constructor that returns `None` is called again on
the next lookup. Lookups are guarded by a lock, so the container can be shared
between threads.

```python
from edgeboot.di import Container

container = Container({
    "foo": lambda get: {"message": "foo"},
    "bar": lambda get: {"message": "bar", "foo": get("foo")},
})

bar = container.get("bar")
print(bar["foo"]["message"])  # foo
```

`Container.update` adds constructors or replaces existing ones; a replaced
service is built again on its next lookup.

`type_instance_to_name(value)` returns `"<module>.<qualified class name>"` for
the type of a value (or for the class itself when given a class), handy as a
container key:

```python
from edgeboot.di import type_instance_to_name

key = type_instance_to_name(some_client)
```

## Configuration

`edgeboot.config` holds the configuration sections a service works with, as
dataclasses with empty defaults: `ServiceInfo`, `CORSConfigurationInfo`,
`ConfigProviderInfo`, `RegistryInfo`, `ClientInfo`, `SecretStoreInfo` (with
`AuthenticationInfo` and `RuntimeTokenProviderInfo`), `Database`,
`Credentials`, `CertKeyPair`, `InsecureSecretsInfo`, `MessageBusInfo`,
`ExternalMQTTInfo`, `TelemetryInfo` and `BootstrapConfiguration`.

```python
from edgeboot.config import ServiceInfo, MessageBusInfo, TelemetryInfo, new_secret_store_info

service = ServiceInfo(host="localhost", port=59880)
service.url()           # "http://localhost:59880"
service.health_check()  # "http://localhost:59880/api/v3/ping"

bus = MessageBusInfo(protocol="tcp", host="localhost", port=1883)
bus.url()                    # "tcp://localhost:1883"
bus.get_base_topic_prefix()  # "edgex" when base_topic_prefix is empty

telemetry = TelemetryInfo(metrics={"MyMetric": True})
telemetry.get_enabled_metric_name("MyMetric-1234")  # ("MyMetric", True)
telemetry.get_enabled_metric_name("Other")          # ("", False)

store = new_secret_store_info("my-service")
store.port        # 8200
store.token_file  # "/tmp/edgex/secrets/my-service/secrets-token.json"
```

The module also exports the constants `DEFAULT_HTTP_PROTOCOL`,
`SERVICE_TYPE_APP`, `SERVICE_TYPE_DEVICE`, `SERVICE_TYPE_OTHER`,
`COMMON_CONFIG_DONE`, `API_PING_ROUTE`, `DEFAULT_BASE_TOPIC` and
`DEFAULT_SECRET_STORE`.

## What this package does not do

The configuration records are plain data. The package does not read
configuration from files, environment variables or a configuration provider,
does not register with a service registry, does not connect to a message bus,
MQTT broker, database or secret store, and has no command-line program.