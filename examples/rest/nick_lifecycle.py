import logging
import uuid

from axme import AxmeClient, AxmeHTTPError, RegisterNickRequest, RequestOptions


def main():
    logging.basicConfig(level=logging.DEBUG)

    # Reads AXME_BASE_URL and AXME_API_KEY
    client = AxmeClient.from_env(logger=logging.getLogger("axme.example"))
    trace_id = uuid.uuid4().hex

    with client:
        availability = client.check_nick("@partner.user", RequestOptions(trace_id=trace_id))
        if not availability.get("available"):
            print(f"Nick taken: {availability}")
            return

        request = RegisterNickRequest(nick="@partner.user", display_name="Partner User")
        try:
            registered = client.register_nick(
                request,
                RequestOptions(idempotency_key=f"register-{trace_id}", trace_id=trace_id),
            )
        except AxmeHTTPError as e:
            print(f"Registration failed ({e.status_code}): {e.body}")
            return

        owner_agent = registered["owner_agent"]
        print(f"Registered {registered.get('nick')} for {owner_agent}")

        profile = client.get_user_profile(owner_agent, RequestOptions(trace_id=trace_id))
        print(f"Profile: {profile}")


if __name__ == "__main__":
    main()
