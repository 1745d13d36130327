from enum import Enum


class ShipmentStatus(str, Enum):
    """Customer-facing shipment states shown on the tracking page"""

    PENDING = "Pending"
    PROCESSING = "Processing"
    IN_TRANSIT = "In Transit"
    OUT_FOR_DELIVERY = "Out for Delivery"
    DELIVERED = "Delivered"
    CANCELLED = "Cancelled"
    ON_HOLD = "On Hold"
    RETURNED = "Returned"


class PackageType(str, Enum):
    STANDARD = "Standard"
    FRAGILE = "Fragile"
    PERISHABLE = "Perishable"
    HAZARDOUS = "Hazardous"
    DOCUMENTS = "Documents"
    ELECTRONICS = "Electronics"
    CLOTHING = "Clothing"
    OTHER = "Other"


class ShippingMethod(str, Enum):
    STANDARD = "Standard"
    EXPRESS = "Express"
    OVERNIGHT = "Overnight"
    ECONOMY = "Economy"
    PRIORITY = "Priority"
    FREIGHT = "Freight"


class ServiceLevel(str, Enum):
    STANDARD = "standard"
    EXPRESS = "express"
    PRIORITY = "priority"
    ECONOMY = "economy"
    SAME_DAY = "same_day"
    NEXT_DAY = "next_day"


class InsuranceType(str, Enum):
    NONE = "None"
    BASIC = "Basic"
    STANDARD = "Standard"
    PREMIUM = "Premium"
    FULL_COVERAGE = "Full Coverage"

