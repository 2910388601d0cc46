"""AWS region enumeration used to configure the CloudWatch backend."""
from enum import Enum

from pluggable_logger.domain.exceptions import InvalidRegionError


class AwsRegion(str, Enum):
    """
    AWS regions known to the CloudWatch backend.

    Global regions (aws-global and friends) are not bound to a geography.
    """

    AP_SOUTH_2 = "ap-south-2"
    AP_SOUTH_1 = "ap-south-1"
    EU_SOUTH_1 = "eu-south-1"
    EU_SOUTH_2 = "eu-south-2"
    US_GOV_EAST_1 = "us-gov-east-1"
    ME_CENTRAL_1 = "me-central-1"
    CA_CENTRAL_1 = "ca-central-1"
    EU_CENTRAL_1 = "eu-central-1"
    US_ISO_WEST_1 = "us-iso-west-1"
    EU_CENTRAL_2 = "eu-central-2"
    US_WEST_1 = "us-west-1"
    US_WEST_2 = "us-west-2"
    AF_SOUTH_1 = "af-south-1"
    EU_NORTH_1 = "eu-north-1"
    EU_WEST_3 = "eu-west-3"
    EU_WEST_2 = "eu-west-2"
    EU_WEST_1 = "eu-west-1"
    AP_NORTHEAST_3 = "ap-northeast-3"
    AP_NORTHEAST_2 = "ap-northeast-2"
    AP_NORTHEAST_1 = "ap-northeast-1"
    ME_SOUTH_1 = "me-south-1"
    SA_EAST_1 = "sa-east-1"
    AP_EAST_1 = "ap-east-1"
    CN_NORTH_1 = "cn-north-1"
    US_GOV_WEST_1 = "us-gov-west-1"
    AP_SOUTHEAST_1 = "ap-southeast-1"
    AP_SOUTHEAST_2 = "ap-southeast-2"
    US_ISO_EAST_1 = "us-iso-east-1"
    AP_SOUTHEAST_3 = "ap-southeast-3"
    AP_SOUTHEAST_4 = "ap-southeast-4"
    US_EAST_1 = "us-east-1"
    US_EAST_2 = "us-east-2"
    CN_NORTHWEST_1 = "cn-northwest-1"
    US_ISOB_EAST_1 = "us-isob-east-1"
    AWS_GLOBAL = "aws-global"
    AWS_CN_GLOBAL = "aws-cn-global"
    AWS_US_GOV_GLOBAL = "aws-us-gov-global"
    AWS_ISO_GLOBAL = "aws-iso-global"
    AWS_ISO_B_GLOBAL = "aws-iso-b-global"

    @property
    def id(self) -> str:
        """Return the region code, e.g. us-east-1."""
        return self.value

    @property
    def is_global_region(self) -> bool:
        """Check if the region is global rather than geographic."""
        return self in _GLOBAL_REGIONS

    @classmethod
    def from_string(cls, region_id: str) -> "AwsRegion":
        """
        Find the region matching a code, ignoring case.

        Args:
            region_id: Region code such as "us-east-1" or "US-EAST-1"

        Returns:
            The matching AwsRegion

        Raises:
            InvalidRegionError: If no region has that code
        """
        for region in cls:
            if region.value.lower() == region_id.lower():
                return region
        raise InvalidRegionError(region_id)

    @staticmethod
    def get_region_string(region: "AwsRegion") -> str:
        """Return the region code of a region."""
        return region.id


_GLOBAL_REGIONS = frozenset({
    AwsRegion.AWS_GLOBAL,
    AwsRegion.AWS_CN_GLOBAL,
    AwsRegion.AWS_US_GOV_GLOBAL,
    AwsRegion.AWS_ISO_GLOBAL,
    AwsRegion.AWS_ISO_B_GLOBAL,
})
