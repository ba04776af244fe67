from ..schemas.collection_names import DatabaseCollectionNames
from ..schemas.users import Role, User
from .repository import FirestoreCollectionDB


class FirestoreUsersDB(FirestoreCollectionDB[User]):
    collection_name = DatabaseCollectionNames.USERS_COLLECTION_NAME.value
    model = User


class FirestoreRolesDB(FirestoreCollectionDB[Role]):
    collection_name = DatabaseCollectionNames.ROLES_COLLECTION_NAME.value
    model = Role
