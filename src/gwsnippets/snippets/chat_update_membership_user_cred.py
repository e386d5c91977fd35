"""
Update a membership's role with user credentials.
https://developers.google.com/workspace/chat/update-members
"""
import logging
import sys

from ..access import gws
from ..chat import Membership, updateMembership
from . import run

logger = logging.getLogger(__name__)

USER_AUTH_OAUTH_SCOPES = ['https://www.googleapis.com/auth/chat.memberships']

# Replace SPACE_NAME and MEMBER_NAME here
MEMBERSHIP_NAME = 'spaces/SPACE_NAME/members/MEMBER_NAME'
# Replace with ROLE_MEMBER or ROLE_MANAGER
ROLE_NAME = 'ROLE_MEMBER'

def main(name: str = MEMBERSHIP_NAME, role: str = ROLE_NAME) -> Membership:
    gws.append_scopes(USER_AUTH_OAUTH_SCOPES)

    request = {
        'membership': {
            'name': name,
            'role': role
        },
        # The field paths to update.
        'updateMask': {
            'paths': ['role']
        }
    }

    response = updateMembership(request['membership'], request['updateMask']['paths'])

    logger.info("%r", response)
    return response

if __name__ == '__main__':
    run(main, *sys.argv[1:])
