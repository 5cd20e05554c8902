"""Ordered classification rules and source priorities.

Rules are (regex, subsection id) pairs tried top to bottom against an
endpoint's full path; the first match wins. A more specific pattern must sit
above any general pattern that would also match it, or it is unreachable.
Case-insensitive rules carry an inline ``(?i)`` flag.
"""

CLASSIFICATION_RULES: list[tuple[str, str]] = [
    # -- Customer authentication (before general auth) --
    (r"/auth/v1/mfa/", "customer-auth-mfa"),
    (r"/auth/v1/web/", "customer-auth-first-factor"),
    (r"/auth/v1/", "customer-auth-first-factor"),
    # -- Customer v2 lookup (before general /customers) --
    (r"/customers/lookup", "customer-v2-lookup"),
    # -- Customer labels (before general /customers) --
    (r"/customers/labels", "customer-labels"),
    (r"/customers/[^/]*/labels", "customer-labels"),
    (r"/customers/[^/]*/changeLabels", "customer-labels"),
    # -- Customer v2 --
    (r"/v2/customers", "customer-v2"),
    (r"/customers", "customer-v2"),
    (r"/integrations/customer", "customer-v2"),
    # -- Customer v1 --
    (r"/v1\.1/customer/", "customer-v1"),
    (r"/customer/add", "customer-v1"),
    (r"/customer/get", "customer-v1"),
    (r"/customer/update", "customer-v1"),
    (r"/customer/search", "customer-v1"),
    (r"/customer/coupons", "customer-v1"),
    (r"/customer/preferences", "customer-v1"),
    (r"/customer/notes", "customer-v1"),
    (r"/customer/tickets", "customer-v1"),
    (r"/customer/subscriptions", "customer-v1"),
    (r"/customer/interactions", "customer-v1"),
    (r"/customer/redemptions", "customer-v1"),
    (r"/customer/referrals", "customer-v1"),
    (r"/customer/recommendations", "customer-v1"),
    (r"/customer/walkin", "customer-v1"),
    # -- Transaction v2 (before v1) --
    (r"/v2/transactions", "transaction-v2"),
    (r"/transactions", "transaction-v2"),
    (r"/simulation/transactions", "transaction-v2"),
    # -- Transaction v1 --
    (r"/v1\.1/transaction/", "transaction-v1"),
    (r"/transaction/add", "transaction-v1"),
    (r"/transaction/get", "transaction-v1"),
    (r"/transaction/update", "transaction-v1"),
    # -- Transaction rejection --
    (r"/rejectedTransactions", "transaction-rejection"),
    # -- Coupon upload (before general coupon) --
    (r"/upload/", "coupon-upload"),
    (r"/coupon/api/v1/upload", "coupon-upload"),
    # -- Coupon v2 --
    (r"/v2/coupon", "coupon-v2"),
    (r"/coupon/series", "coupon-v2"),
    (r"/coupon/bulk", "coupon-v2"),
    (r"/coupon/issue/multiple", "coupon-v2"),
    (r"/coupon/reactivate", "coupon-v2"),
    (r"/coupon/revoke", "coupon-v2"),
    (r"/coupon/is_redeemable", "coupon-v2"),
    (r"/coupon/redeem$", "coupon-v2"),
    (r"/coupon/issue$", "coupon-v2"),
    (r"/coupon$", "coupon-v2"),
    # -- Coupon v1.1 --
    (r"/v1\.1/coupon", "coupon-v1"),
    (r"/coupon/", "coupon-v1"),
    # -- Cards --
    (r"/card", "cards"),
    (r"/cardNumber", "cards"),
    (r"/configs/CONF_MAX_CARDS", "cards"),
    # -- Points connected orgs (before general points / ledger) --
    (r"/v2\.1/pointsLedger", "points-connected-orgs"),
    # -- Points ledger (before general points) --
    (r"/pointsLedger", "points-ledger"),
    # -- Points v2 --
    (r"/v2/points", "points-v2"),
    (r"/points/isTransferable", "points-v2"),
    (r"/points/reverse", "points-v2"),
    (r"/points/transfer", "points-v2"),
    (r"/points/unlockPromisedPoints", "points-v2"),
    (r"/points/updateRedemption", "points-v2"),
    (r"/points/userGroup2", "points-v2"),
    # -- Points v1.1 --
    (r"/v1\.1/points", "points-v1"),
    (r"/points/redeem", "points-v1"),
    (r"/points/isredeemable", "points-v1"),
    (r"/points/validationcode", "points-v1"),
    (r"/points/", "points-v2"),
    # -- Leaderboards (before targets) --
    (r"/leaderboards/", "leaderboards"),
    # -- Targets / milestones --
    (r"/targetGroups", "milestones-streaks"),
    (r"/v3/targetGroups", "milestones-streaks"),
    (r"(?i)/users/.*target", "milestones-streaks"),
    (r"/users/replayEvents", "milestones-streaks"),
    (r"/users/triggerTarget", "milestones-streaks"),
    (r"/users/updateTarget", "milestones-streaks"),
    (r"/users/.*/enrolledTargets", "milestones-streaks"),
    (r"/users/.*/targetGroups", "milestones-streaks"),
    (r"/users/.*/trackedTarget", "milestones-streaks"),
    # -- Unified loyalty promotions --
    (r"/v3/unifiedPromotions", "unified-loyalty-promotions"),
    (r"/unifiedPromotions", "unified-loyalty-promotions"),
    # -- Rewards (specific before general) --
    (r"/file-service/", "rewards-file-service"),
    (r"/rewards/core/v1/vendor", "rewards-vendor-management"),
    (r"/rewards/core/v1/fulfillmentStatus", "rewards-fulfillment-status"),
    (r"/rewards/core/v1/reward/expiryReminder", "rewards-expiry-reminders"),
    (r"/rewards/core/v1/brand/richContentMeta", "rewards-rich-text-content"),
    (r"/rewards/core/v1/metadata/categor", "rewards-catalog-categories"),
    (r"/rewards/core/v1/brand/customfield", "rewards-catalog-custom-fields"),
    (r"/rewards/core/v1/group", "rewards-catalog-groups"),
    (r"/rewards/core/v1/brand/constraints", "rewards-points-restrictions"),
    (r"/rewards/core/v1/brand/config", "rewards-org-config"),
    (r"/rewards/core/v1/[^/]*/getConfig", "rewards-org-config"),
    (r"/rewards/core/v1/promotion", "rewards-catalog-promotions"),
    (r"/rewards/core/v1/reward/claim", "rewards-catalog-issuance"),
    (r"/rewards/core/v1/user/reward/.*/issue", "rewards-catalog-issuance"),
    (r"/rewards/core/v1/user/rewards/issue", "rewards-catalog-issuance"),
    (r"/rewards/core/v1/management/transactions", "rewards-catalog-issuance"),
    (r"/rewards/core/v1/user/", "rewards-user-queries"),
    (r"/rewards/core/v1/management/customer", "rewards-user-queries"),
    (r"/rewards/core/v1\.1/reward-transactions", "rewards-user-queries"),
    (r"/rewards/core/v1/reward-transactions", "rewards-user-queries"),
    (r"/rewards/core/v1/reward/brand", "rewards-brand-queries"),
    (r"/rewards/core/v1/reward/list/brand", "rewards-brand-queries"),
    (r"/rewards/core/v1/brand/getAll", "rewards-brand-queries"),
    (r"/rewards/core/v1/reward", "rewards-catalog-management"),
    (r"/rewards/core/v1/user-merge", "rewards-user-queries"),
    (r"/rewards/", "rewards-catalog-management"),
    (r"(?i)/mobile/.*marvel.*reward", "rewards-user-queries"),
    (r"(?i)/mobile/.*marvel.*voucher", "rewards-user-queries"),
    (r"/v1\.1/user/rewards", "rewards-catalog-issuance"),
    (r"/v1\.1/user/user_rewards", "rewards-user-queries"),
    # -- Loyalty promotions --
    (r"/loyalty/v1/programs", "loyalty-promotion"),
    (r"/loyalty/api/v1/", "loyalty-promotion"),
    (r"/promotion/bulk/", "loyalty-promotion"),
    (r"/promotion/issue", "loyalty-promotion"),
    # -- Cart promotions --
    (r"/api_gateway/v1/promotions", "cart-promotions"),
    (r"/v1/promotions/", "cart-promotions"),
    (r"/v1/promotion-management/", "cart-promotions"),
    (r"/v1/management/promotions", "cart-promotions"),
    (r"/promotion-management/promotions", "cart-promotions"),
    # -- Badges --
    (r"/badges/", "badges"),
    (r"/v1/badges/", "badges"),
    # -- Event transformation (before general cortex) --
    (r"/cortex/v1/neo-config", "event-transformation-cortex"),
    # -- Search / cortex --
    (r"/cortex/", "search-apis"),
    (r"/search/", "search-apis"),
    # -- Event notification logs --
    (r"(?i)/webHooks", "event-notification-logs"),
    # -- Behavioral events --
    (r"/events/", "behavioral-events"),
    (r"/events\?", "behavioral-events"),
    # -- User group --
    (r"/userGroup", "user-group"),
    # -- Organization v2 --
    (r"/v2/org", "organization-v2"),
    (r"/orgEntity/", "organization-v2"),
    (r"/organization/activeTill", "organization-v2"),
    (r"/organization/customFields", "organization-v2"),
    (r"/organization/labels", "organization-v2"),
    (r"/organization/programs", "organization-v2"),
    (r"/organization/till", "organization-v2"),
    # -- Organization v1 --
    (r"/v1\.1/organization", "organization-v1"),
    (r"/organization/", "organization-v1"),
    (r"/org/[^/]*/sources", "organization-v1"),
    (r"/entity/extended_field", "organization-v1"),
    # -- Company --
    (r"/companies", "company"),
    # -- Communications --
    (r"/v2/communications", "communications-v2"),
    (r"/communications/", "communications-v2"),
    # -- Staff --
    (r"/staff", "staff"),
    # -- Leads --
    (r"/leads", "leads"),
    # -- User auth --
    (r"/user_auth/", "user-authentication"),
    # -- Requests (workflow before general requests) --
    (r"/request-workflow", "request-workflow"),
    (r"/v2/requests", "requests-v2"),
    (r"/requests", "requests-v2"),
    # -- Request v1 --
    (r"/v1\.1/request", "request-v1"),
    (r"/request/", "request-v1"),
    # -- Partner program --
    (r"/partnerProgram", "partner-program"),
    # -- Custom fields --
    (r"/customField", "custom-fields"),
    (r"/customFields", "custom-fields"),
    (r"/entity/extendedField", "custom-fields"),
    # -- Audit logs --
    (r"/audits", "audit-logs"),
    (r"/unified-audits", "audit-logs"),
    # -- Referral --
    (r"/referral", "referral"),
    # -- Product v1 --
    (r"/v1\.1/product", "product-v1"),
    (r"/product/", "product-v1"),
    # -- Store --
    (r"/v1\.1/store", "store"),
    (r"/store/", "store"),
    # -- Task --
    (r"/v1\.1/task", "task"),
    (r"/task/", "task"),
    # -- OTP --
    (r"/otp/", "otp"),
    # -- Historical points --
    (r"/historicalPoints", "points-v2"),
    # -- Milestones (v3 path) --
    (r"/v3/milestones", "milestones-streaks"),
    # -- OTP (v2 path) --
    (r"/v2/otp", "otp"),
    # -- Extended fields --
    (r"/v2/extendedFields", "custom-fields"),
    # -- Bulk customer operations --
    (r"/v2/bulk/getCustomers", "customer-v2"),
    (r"/v2/bulk$", "customer-v2"),
    # -- Events (v2 direct path) --
    (r"/v2/events", "behavioral-events"),
    # -- Private / DAS --
    (r"/das/", "private-apis"),
    (r"/x/neo/", "private-apis"),
    # -- DIY template --
    (r"/diy", "diy-template"),
    (r"/workspaces", "diy-template"),
    (r"/diyprocessors", "diy-template"),
    # -- Store locator --
    (r"/store-locator", "store-locator"),
    (r"/integration/v1/", "store-locator"),
    (r"/integration/v1/sync", "store-locator"),
    # -- Dataflow / Connect+ --
    (r"/dataflows/", "diy-template"),
    (r"/debug-mode/", "diy-template"),
    (r"/blocks", "diy-template"),
    # -- Other --
    (r"/earning$", "other-apis"),
    (r"/feed$", "other-apis"),
    (r"/currencyratio", "other-apis"),
    (r"/meta/sources", "other-apis"),
    (r"/survey", "other-apis"),
    (r"/fleet", "other-apis"),
    (r"/genericStatus", "other-apis"),
    (r"/verticals", "other-apis"),
    (r"/recommendations/", "other-apis"),
    (r"/slab/", "other-apis"),
    (r"/activitySessions", "other-apis"),
]

# Higher weight wins when two sources define the same path + method.
SOURCE_PRIORITY: dict[str, int] = {
    "v2.json": 10,
    "v1.json": 10,
    "v3.json": 10,
    "customer-v11.json": 8,
    "organization-1.json": 8,
    "organization-2.json": 8,
    "organization-3.json": 8,
}

DEFAULT_SOURCE_PRIORITY = 5

# Leading path segments that mark a path as already fully qualified, so the
# server base path is not prepended a second time. Regex fragments.
NAMESPACE_PREFIXES: list[str] = [
    r"v\d",
    "api_gateway",
    "auth",
    "das",
    "mobile",
    "coupon",
    "upload",
    "loyalty",
    "x",
]

PLACEHOLDER_PATH_TOKEN = "check_API_Endpoint_Example"

DEFAULT_SERVER_HOST = "eu.api.capillarytech.com"

API_KEY_HEADER = "X-CAP-API-OAUTH-TOKEN"
