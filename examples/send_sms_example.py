"""
Usage Examples for the Nexmo REST client
Demonstrates configuration, messaging and account calls
"""

from nexmo_rest import (
    ConfigLoader,
    ConfigValidator,
    NexmoClient,
    NexmoConfig,
    NexmoError,
    ValidationError,
)
from nexmo_rest.models import MessageType, SmsOptions


# =============================================================================
# Example 1: Programmatic Configuration
# =============================================================================

def programmatic_config_example() -> NexmoClient:
    """Create a client with explicit credentials"""
    return NexmoClient({
        "apiKey": "your-api-key",
        "apiSecret": "your-api-secret",

        # Optional settings
        "baseUrl": "rest.nexmo.com",
        "useTLS": True,
        "debug": False,
    })


# =============================================================================
# Example 2: Environment and File Configuration
# =============================================================================

def env_config_example() -> NexmoClient:
    """
    Create a client from environment variables

    Set these environment variables before running:

    export NEXMO_API_KEY="your-api-key"
    export NEXMO_API_SECRET="your-api-secret"
    export NEXMO_DEBUG="true"
    """
    return NexmoClient.from_environment()


def file_config_example() -> NexmoConfig:
    """
    Merge configuration from a JSON file and the environment
    Priority: programmatic > environment > file
    """
    loader = ConfigLoader()
    return loader.load(
        file="./config/nexmo_config.json",
        env=True,
        config={"timeout": 60000},
    )


# =============================================================================
# Example 3: Sending Messages
# =============================================================================

def send_sms_example(client: NexmoClient) -> None:
    """Send a text message and wait for the result"""
    future = client.send_text_message("Acme", "447700900000", "Hello from Acme")

    try:
        response = future.result(timeout=30)
        print(f"Message id: {response['messages'][0]['message-id']}")
    except NexmoError as e:
        print(f"Send failed: {e.get_description()}")


def send_with_options_example(client: NexmoClient) -> None:
    """Send an SMS built from an options model, with a delivery receipt"""
    options = SmsOptions(
        from_="Acme",
        to="447700900000",
        type=MessageType.TEXT,
        text="Your order has shipped",
        status_report_req=True,
        client_ref="order-1042",
    )

    def on_complete(error, result):
        if error is not None:
            print(f"Send failed: {error}")
        else:
            print(f"Accepted: {result['messages'][0]['message-id']}")

    client.send_message(options, on_complete)


# =============================================================================
# Example 4: Account Operations
# =============================================================================

def account_example(client: NexmoClient) -> None:
    """Check the balance and outbound pricing"""
    balance = client.get_balance()
    pricing = client.get_pricing("GB")

    print(f"Balance: {balance.result(timeout=30)['value']}")
    print(f"GB pricing: {pricing.result(timeout=30)}")


# =============================================================================
# Example 5: Validation Errors
# =============================================================================

def validation_example(client: NexmoClient) -> None:
    """Invalid input is rejected before anything is sent"""
    try:
        client.search_messages_by_ids([f"id-{i}" for i in range(11)])
    except ValidationError as e:
        print(f"  - {e.field}: {e}")

    result = ConfigValidator().validate({"apiKey": "your-api-key"})
    for error in result.errors:
        print(f"  - {error.field}: {error.message}")


# =============================================================================
# Run Examples
# =============================================================================

if __name__ == "__main__":
    print("=== Nexmo REST Examples ===\n")

    with programmatic_config_example() as client:
        print("5. Validation Errors:")
        validation_example(client)
        print()

        print("3. Send SMS:")
        send_sms_example(client)
        print()

        print("4. Account:")
        account_example(client)
