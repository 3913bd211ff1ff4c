# backend/utils/service_catalog.py
# Maps a request path to the backend service behind it.
# Order matters: the first entry whose path occurs in the request path wins.
from typing import Sequence

from schemas.service_info import ServiceDescriptor

SERVICE_CATALOG: Sequence[ServiceDescriptor] = (
    ServiceDescriptor(
        path="/auth",
        name="Authentication Service",
        description="Handles user login, signup, and token verification",
        connection_steps=[
            "1. Ensure backend authentication service is running on port 8080",
            "2. Verify JWT token configuration in environment variables",
            "3. Check database connection for user credentials storage",
            "4. Confirm OTP service integration (SMS/Email provider)",
        ],
    ),
    ServiceDescriptor(
        path="/products",
        name="Product Catalog Service",
        description="Manages product information, categories, and inventory",
        connection_steps=[
            "1. Start product microservice on designated port",
            "2. Connect to product database (MongoDB/PostgreSQL)",
            "3. Verify image storage service (AWS S3/CloudFront)",
            "4. Check search engine integration (Elasticsearch)",
        ],
    ),
    ServiceDescriptor(
        path="/orders",
        name="Order Management Service",
        description="Processes orders, tracking, and order history",
        connection_steps=[
            "1. Launch order processing service",
            "2. Connect to orders database",
            "3. Verify payment gateway integration",
            "4. Check shipping provider API connections",
        ],
    ),
    ServiceDescriptor(
        path="/payments",
        name="Payment Processing Service",
        description="Handles payment transactions and refunds",
        connection_steps=[
            "1. Configure payment gateway (Stripe/PayPal)",
            "2. Set up webhook endpoints for payment events",
            "3. Verify SSL certificates for secure transactions",
            "4. Test payment provider API credentials",
        ],
    ),
    ServiceDescriptor(
        path="/cart",
        name="Shopping Cart Service",
        description="Manages user shopping cart and session data",
        connection_steps=[
            "1. Start cart service with Redis/session storage",
            "2. Configure session timeout settings",
            "3. Verify user authentication integration",
            "4. Check cart persistence database connection",
        ],
    ),
    ServiceDescriptor(
        path="/users",
        name="User Management Service",
        description="Handles user profiles and administrative functions",
        connection_steps=[
            "1. Start user management microservice",
            "2. Connect to user database",
            "3. Verify role-based access control (RBAC)",
            "4. Check email notification service integration",
        ],
    ),
    ServiceDescriptor(
        path="/inventory",
        name="Inventory Management Service",
        description="Tracks stock levels and inventory updates",
        connection_steps=[
            "1. Launch inventory tracking service",
            "2. Connect to inventory database",
            "3. Set up real-time stock update webhooks",
            "4. Configure low-stock alert notifications",
        ],
    ),
    ServiceDescriptor(
        path="/emails",
        name="Email Notification Service",
        description="Sends transactional and marketing emails",
        connection_steps=[
            "1. Configure email service provider (SendGrid/AWS SES)",
            "2. Set up email templates and SMTP settings",
            "3. Verify domain authentication (SPF/DKIM)",
            "4. Test email delivery and bounce handling",
        ],
    ),
    ServiceDescriptor(
        path="/analytics",
        name="Analytics & Reporting Service",
        description="Provides business intelligence and metrics",
        connection_steps=[
            "1. Start analytics data processing service",
            "2. Connect to analytics database (ClickHouse/BigQuery)",
            "3. Set up data pipeline and ETL processes",
            "4. Configure real-time dashboard updates",
        ],
    ),
    ServiceDescriptor(
        path="/wishlist",
        name="Wishlist Service",
        description="Manages user wishlists and favorites",
        connection_steps=[
            "1. Start wishlist microservice",
            "2. Connect to user preferences database",
            "3. Verify user authentication integration",
            "4. Set up wishlist sharing functionality",
        ],
    ),
    ServiceDescriptor(
        path="/reviews",
        name="Review & Rating Service",
        description="Handles product reviews and ratings",
        connection_steps=[
            "1. Launch review management service",
            "2. Connect to reviews database",
            "3. Set up content moderation system",
            "4. Configure review notification system",
        ],
    ),
    ServiceDescriptor(
        path="/coupons",
        name="Coupon & Discount Service",
        description="Manages promotional codes and discounts",
        connection_steps=[
            "1. Start coupon validation service",
            "2. Connect to promotions database",
            "3. Set up usage tracking and limits",
            "4. Configure expiration and validation rules",
        ],
    ),
)

FALLBACK_SERVICE = ServiceDescriptor(
    path="",
    name="Backend API Service",
    description="General backend service",
    connection_steps=[
        "1. Ensure backend server is running",
        "2. Check network connectivity",
        "3. Verify API endpoint configuration",
        "4. Confirm service dependencies are available",
    ],
)


def classify(path: str, catalog: Sequence[ServiceDescriptor] = SERVICE_CATALOG) -> ServiceDescriptor:
    for service in catalog:
        if service.path in path:
            return service
    return FALLBACK_SERVICE
