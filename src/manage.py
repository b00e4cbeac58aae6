"""SellerDesk Sales management CLI.

Stores are in-memory, so every run starts empty. The ``demo`` command loads
the sample dashboard orders, walks them through completion, invoicing and
payment, and prints the revenue snapshot for the requested window.

Usage:
    python src/manage.py demo                                # week window
    python src/manage.py demo --kind month
    python src/manage.py demo --kind custom --start 2023-06-01 --end 2023-06-30
"""

import argparse
import json
import sys

SAMPLE_ORDERS = [
    {"customer_name": "John Doe", "placed_on": "June 15, 2023", "status": "Completed", "total": 120.00},
    {"customer_name": "Jane Smith", "placed_on": "June 16, 2023", "status": "Processing", "total": 85.50},
    {"customer_name": "Robert Johnson", "placed_on": "June 17, 2023", "status": "Cancelled", "total": 220.75},
    {"customer_name": "Mary Williams", "placed_on": "June 18, 2023", "status": "Pending", "total": 150.25},
    {"customer_name": "David Brown", "placed_on": "June 19, 2023", "status": "Completed", "total": 95.00},
]


def load_sample_data(controller):
    """Record the sample orders, invoice the first completed one and mark it paid."""
    order_ids = [controller.record_new_order(**order) for order in SAMPLE_ORDERS]

    # Jane Smith's order gets finished from the dashboard
    controller.mark_order_complete(order_ids[1])

    action = controller.create_invoice_for_order(order_ids[0])
    if action.accepted:
        controller.toggle_paid(action.reference)
    return order_ids


def run_demo(kind, start=None, end=None):
    from sales.dashboard.controller import DashboardController
    from sales.domain import sales

    sales.init()
    with sales.domain_context():
        controller = DashboardController()
        load_sample_data(controller)
        snapshot = controller.change_window(kind, start, end)
        print(json.dumps(snapshot.to_dict(), indent=2))


def main():
    parser = argparse.ArgumentParser(description="SellerDesk Sales management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    demo_parser = subparsers.add_parser("demo", help="Load sample data and print a revenue snapshot")
    demo_parser.add_argument(
        "--kind",
        choices=["day", "week", "month", "custom"],
        default="week",
        help="Reporting window (default: week)",
    )
    demo_parser.add_argument("--start", help="Custom window start (YYYY-MM-DD)")
    demo_parser.add_argument("--end", help="Custom window end (YYYY-MM-DD)")

    args = parser.parse_args()

    if args.command == "demo":
        run_demo(args.kind, args.start, args.end)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
