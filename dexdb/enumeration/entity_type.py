from enum import Enum, unique


@unique
class EntityType(str, Enum):
    TOKEN = 'token'
    PAIR = 'pair'
    SWAP = 'swap'
    LOG = 'log'
    BLOCK = 'block'
    TRANSACTION = 'transaction'

    def __str__(self):
        return self.value


@unique
class LogVariant(str, Enum):
    # topic0..topic3 columns
    TOPIC_COLUMNS = 'topic_columns'
    # single JSON "topics" column
    TOPICS_JSON = 'topics_json'

    def __str__(self):
        return self.value


ENTITY_TYPE_TO_TABLE_MAPPING = {
    EntityType.TOKEN: 'Token',
    EntityType.PAIR: 'Pair',
    EntityType.SWAP: 'Swap',
    EntityType.LOG: 'Log',
    EntityType.BLOCK: 'Block',
    EntityType.TRANSACTION: 'Transaction',
}

ALL = tuple(EntityType)
