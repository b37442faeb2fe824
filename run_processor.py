#!/usr/bin/env python
"""
Script to process a customer's pending orders from the command line
"""
import argparse
import json
import sys

from pydantic import ValidationError

from order_processing.config import settings
from order_processing.container import build_customer_order_processor
from order_processing.exceptions import OrderProcessingError
from order_processing.logging_config import setup_logging


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Process a customer's pending orders")
    parser.add_argument("customer_id", type=int, help="Customer ID")
    args = parser.parse_args(argv)
    
    setup_logging(settings.LOG_LEVEL)
    processor = build_customer_order_processor()
    
    try:
        orders = processor.process_customer_orders(args.customer_id)
    except ValidationError:
        raise
    except (ValueError, OrderProcessingError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    
    print(json.dumps([o.model_dump(mode="json") for o in orders], indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
