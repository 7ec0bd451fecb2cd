"""Send one SMS/LMS (optionally scheduled) using a YAML client config."""

from __future__ import annotations

import argparse

from solapi_messaging import Message, SolapiMessageService, load_config
from solapi_messaging.logging_utils import configure_logging


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--config", default="config/solapi.yaml", help="YAML file with api_key/api_secret")
    parser.add_argument("--to", required=True, help="Recipient number")
    parser.add_argument("--from", dest="sender", required=True, help="Registered sender number")
    parser.add_argument("--text", required=True)
    parser.add_argument("--schedule", default=None, help="ISO-8601 date to schedule the message")
    parser.add_argument("--balance", action="store_true", help="Print remaining balance after sending")
    args = parser.parse_args()

    config = load_config(args.config)
    logger = configure_logging(config.log_level)
    service = SolapiMessageService.from_config(config)

    message = Message(to=args.to, from_=args.sender, text=args.text)
    result = service.send(
        message,
        scheduled_date=args.schedule,
        app_id=config.app_id,
        allow_duplicates=config.allow_duplicates,
    )
    info = result.group_info
    logger.info(
        "group %s: total=%s failed=%s scheduled=%s",
        info.group_id,
        info.count.total,
        len(result.failed_message_list),
        info.scheduled_date,
    )
    for failed in result.failed_message_list:
        logger.warning("rejected %s: %s %s", failed.to, failed.status_code, failed.status_message)

    if args.balance:
        balance = service.get_balance()
        print(f"balance={balance.balance:.2f} point={balance.point:.2f}")


if __name__ == "__main__":
    main()
