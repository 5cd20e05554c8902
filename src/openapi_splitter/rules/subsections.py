"""Target subsections, one output document each.

Every id here needs at least one rule in ``patterns.py`` to ever receive
endpoints.
"""

SUBSECTIONS: dict[str, dict[str, str]] = {
    # -- Customer --
    "customer-v1": {
        "title": "Customer (V1) APIs",
        "description": "Customer management endpoints - Version 1.1",
        "server_base": "/v1.1",
    },
    "customer-v2": {
        "title": "Customer (V2) APIs",
        "description": "Customer management endpoints - Version 2",
        "server_base": "/v2",
    },
    "customer-v2-lookup": {
        "title": "Customer (V2 Lookup) APIs",
        "description": "Customer lookup endpoints - Version 2",
        "server_base": "/v2",
    },
    "customer-labels": {
        "title": "Customer Labels APIs",
        "description": "Customer label management endpoints",
        "server_base": "/v2",
    },
    # -- Transaction --
    "transaction-v1": {
        "title": "Transaction (V1) APIs",
        "description": "Transaction endpoints - Version 1",
        "server_base": "/v1.1",
    },
    "transaction-v2": {
        "title": "Transaction (V2) APIs",
        "description": "Transaction endpoints - Version 2",
        "server_base": "/v2",
    },
    "transaction-rejection": {
        "title": "Transaction Rejection APIs",
        "description": "Rejected transaction management endpoints",
        "server_base": "/v1",
    },
    # -- Coupon --
    "coupon-v1": {
        "title": "Coupon (V1.1) APIs",
        "description": "Coupon management endpoints - Version 1.1",
        "server_base": "/v1.1",
    },
    "coupon-v2": {
        "title": "Coupon (V2) APIs",
        "description": "Coupon management endpoints - Version 2",
        "server_base": "/v2",
    },
    "coupon-upload": {
        "title": "Coupon Upload (V1) APIs",
        "description": "Coupon upload and batch processing endpoints",
        "server_base": "/v1",
    },
    # -- Cards --
    "cards": {
        "title": "Cards APIs",
        "description": "Card series and card management endpoints",
        "server_base": "/v2",
    },
    # -- Points --
    "points-v2": {
        "title": "Points (V2) APIs",
        "description": "Points management endpoints - Version 2",
        "server_base": "/v2",
    },
    "points-v1": {
        "title": "Points (V1.1) APIs",
        "description": "Points redemption and validation endpoints - Version 1.1",
        "server_base": "/v1.1",
    },
    "points-ledger": {
        "title": "Points Ledger APIs",
        "description": "Points ledger and balance inquiry endpoints",
        "server_base": "/v2",
    },
    "points-connected-orgs": {
        "title": "Points Connected Org APIs",
        "description": "Points ledger endpoints for connected organizations",
        "server_base": "/v2.1",
    },
    # -- Search --
    "search-apis": {
        "title": "Search APIs",
        "description": "Search filter, data field, and Cortex search endpoints",
        "server_base": "/v1",
    },
    "event-transformation-cortex": {
        "title": "Event Transformation for Cortex Search APIs",
        "description": "Custom event transformation configuration for Cortex search",
        "server_base": "/v1",
    },
    # -- Badges --
    "badges": {
        "title": "Badges APIs",
        "description": "Badge creation, issuance, and management endpoints",
        "server_base": "/v1",
    },
    # -- Rewards catalog --
    "rewards-catalog-management": {
        "title": "Reward Catalog Management APIs",
        "description": "Create, update, and retrieve reward details",
        "server_base": "/v1",
    },
    "rewards-catalog-categories": {
        "title": "Reward Catalog Categories APIs",
        "description": "Reward category management endpoints",
        "server_base": "/v1",
    },
    "rewards-rich-text-content": {
        "title": "Rich Text Content for Rewards APIs",
        "description": "Rich text content metadata management for rewards",
        "server_base": "/v1",
    },
    "rewards-catalog-issuance": {
        "title": "Reward Catalog Issuance APIs",
        "description": "Reward issuance and claiming endpoints",
        "server_base": "/v1",
    },
    "rewards-user-queries": {
        "title": "User-Centric Reward Queries APIs",
        "description": "Query rewards, vouchers, and transactions for a user",
        "server_base": "/v1",
    },
    "rewards-brand-queries": {
        "title": "Brand-Level Reward Queries APIs",
        "description": "Query rewards and availability by brand",
        "server_base": "/v1",
    },
    "rewards-catalog-promotions": {
        "title": "Reward Catalog Promotions APIs",
        "description": "Catalog promotion management endpoints",
        "server_base": "/v1",
    },
    "rewards-catalog-custom-fields": {
        "title": "Reward Catalog Custom Fields APIs",
        "description": "Custom field management for rewards",
        "server_base": "/v1",
    },
    "rewards-catalog-groups": {
        "title": "Reward Catalog Groups APIs",
        "description": "Reward group management endpoints",
        "server_base": "/v1",
    },
    "rewards-points-restrictions": {
        "title": "Points Restrictions APIs",
        "description": "Points restriction configuration for rewards",
        "server_base": "/v1",
    },
    "rewards-org-config": {
        "title": "Organization-Level Configuration for Rewards APIs",
        "description": "Organization-level reward catalog configuration",
        "server_base": "/v1",
    },
    "rewards-vendor-management": {
        "title": "Vendor Management & Redemption APIs",
        "description": "Vendor creation, management, and redemption endpoints",
        "server_base": "/v1",
    },
    "rewards-file-service": {
        "title": "File Service APIs",
        "description": "Image upload endpoints for rewards",
        "server_base": "/v1",
    },
    "rewards-fulfillment-status": {
        "title": "Fulfillment Status APIs",
        "description": "Reward fulfillment status management endpoints",
        "server_base": "/v1",
    },
    "rewards-expiry-reminders": {
        "title": "Reward Expiry Reminders APIs",
        "description": "Reward expiry reminder configuration endpoints",
        "server_base": "/v1",
    },
    "rewards-connected-orgs": {
        "title": "Rewards Connected-Org APIs",
        "description": "Reward endpoints for connected organizations",
        "server_base": "/v1",
    },
    "rewards-language": {
        "title": "Rewards Language APIs",
        "description": "Language metadata management for rewards",
        "server_base": "/v1",
    },
    # -- Targets / milestones --
    "milestones-streaks": {
        "title": "Milestone & Streaks APIs",
        "description": "Target group, milestone, and streak management endpoints",
        "server_base": "/v3",
    },
    "target-connected-orgs": {
        "title": "Target Connected Org APIs",
        "description": "Target enrollment endpoints for connected organizations",
        "server_base": "/v3",
    },
    "leaderboards": {
        "title": "Leaderboards APIs",
        "description": "Leaderboard ranking and user rank endpoints",
        "server_base": "/v1",
    },
    # -- Promotions --
    "loyalty-promotion": {
        "title": "Loyalty Promotion APIs",
        "description": "Loyalty promotion enrollment, issuance, and management",
        "server_base": "/v1",
    },
    "unified-loyalty-promotions": {
        "title": "Unified Loyalty Promotions APIs",
        "description": "Unified promotion creation, review, and enrollment",
        "server_base": "/v3",
    },
    "cart-promotions": {
        "title": "Cart Promotions APIs",
        "description": "Cart promotion management, activation, and evaluation",
        "server_base": "/v1",
    },
    # -- User group --
    "user-group": {
        "title": "User Group APIs",
        "description": "User group management, membership, and transactions",
        "server_base": "/v2",
    },
    # -- Organization --
    "organization-v1": {
        "title": "Organization (V1) APIs",
        "description": "Organization details, entities, and configuration - Version 1",
        "server_base": "/v1.1",
    },
    "organization-v2": {
        "title": "Organization (V2) APIs",
        "description": "Organization till, store, and program management - Version 2",
        "server_base": "/v2",
    },
    # -- Communications --
    "communications-v2": {
        "title": "Communications (V2) APIs",
        "description": "Communication message sending endpoints - Version 2",
        "server_base": "/v2",
    },
    "communications-v1": {
        "title": "Communications (V1) APIs",
        "description": "Communication message sending endpoints - Version 1",
        "server_base": "/v1.1",
    },
    # -- Custom fields --
    "custom-fields": {
        "title": "Custom Fields APIs",
        "description": "Custom field creation and tagging endpoints",
        "server_base": "/v2",
    },
    # -- Audit logs --
    "audit-logs": {
        "title": "Audit Logs APIs",
        "description": "Audit log retrieval endpoints",
        "server_base": "/v2",
    },
    # -- PII deletion --
    "pii-deletion": {
        "title": "PII Deletion APIs",
        "description": "PII data deletion request and status endpoints",
        "server_base": "/v2",
    },
    # -- Leads --
    "leads": {
        "title": "Leads APIs",
        "description": "Lead management, assignment, and follow-up endpoints",
        "server_base": "/v2",
    },
    # -- Staff --
    "staff": {
        "title": "Staff APIs",
        "description": "Staff account management endpoints",
        "server_base": "/v2",
    },
    # -- Events --
    "behavioral-events": {
        "title": "Behavioral Events APIs",
        "description": "Custom event creation, webhook, and event log endpoints",
        "server_base": "/v2",
    },
    "event-notification-logs": {
        "title": "Event Notification Logs APIs",
        "description": "Webhook and event log management endpoints",
        "server_base": "/v3",
    },
    # -- Company --
    "company": {
        "title": "Company APIs",
        "description": "Company creation and management endpoints",
        "server_base": "/v2",
    },
    # -- Requests --
    "request-v1": {
        "title": "Request (V1) APIs",
        "description": "Request submission and approval endpoints - Version 1",
        "server_base": "/v1.1",
    },
    "requests-v2": {
        "title": "Requests (V2) APIs",
        "description": "Request management endpoints - Version 2",
        "server_base": "/v2",
    },
    "request-workflow": {
        "title": "Request Workflow APIs",
        "description": "Request workflow creation and approval endpoints",
        "server_base": "/v2",
    },
    # -- Partner program --
    "partner-program": {
        "title": "Partner Program APIs",
        "description": "Customer partner program linking and activity endpoints",
        "server_base": "/v2",
    },
    # -- Authentication --
    "user-authentication": {
        "title": "User Authentication APIs",
        "description": "User registration and authorization endpoints",
        "server_base": "/v2",
    },
    "customer-auth-first-factor": {
        "title": "Customer Authentication - First Factor APIs",
        "description": "Token generation, OTP, and password authentication endpoints",
        "server_base": "/v1",
    },
    "customer-auth-mfa": {
        "title": "Customer Authentication - Multi-Factor APIs",
        "description": "MFA token, OTP, and password flow endpoints",
        "server_base": "/v1",
    },
    # -- OTP --
    "otp": {
        "title": "OTP APIs",
        "description": "OTP generation and validation endpoints",
        "server_base": "/v2",
    },
    # -- Product --
    "product-v2": {
        "title": "Product (V2) APIs",
        "description": "Product brand, category, attribute, and SKU management",
        "server_base": "/v2",
    },
    "product-v1": {
        "title": "Product (V1) APIs",
        "description": "Product management endpoints - Version 1",
        "server_base": "/v1.1",
    },
    # -- Store --
    "store": {
        "title": "Store APIs",
        "description": "Store details, configuration, and task endpoints",
        "server_base": "/v1.1",
    },
    "store-locator": {
        "title": "Store Locator APIs",
        "description": "Store locator and sync data endpoints",
        "server_base": "/v1",
    },
    # -- Task --
    "task": {
        "title": "Task APIs",
        "description": "Task management and reminder endpoints",
        "server_base": "/v1.1",
    },
    # -- Referral --
    "referral": {
        "title": "Referral APIs",
        "description": "Customer referral and validation endpoints",
        "server_base": "/v2",
    },
    # -- DIY template --
    "diy-template": {
        "title": "Connect+ DIY Template APIs",
        "description": "DIY template creation and workspace retrieval endpoints",
        "server_base": "/v1",
    },
    # -- Private / other --
    "private-apis": {
        "title": "Private APIs",
        "description": "Internal data analytics and ledger detail endpoints",
        "server_base": "/v1",
    },
    "other-apis": {
        "title": "Other APIs",
        "description": "Miscellaneous utility and configuration endpoints",
        "server_base": "/v2",
    },
}
