from __future__ import annotations
from discord_next.enums import IntegerEnum, StringEnum, BitFlags, StringBitFlags

__all__ = (
    'AllowedMentionType',
    'ApplicationCommandOptionType',
    'ApplicationCommandPermissionType',
    'ApplicationCommandType',
    'ApplicationFlag',
    'AttachmentFlag',
    'AuditLogChangeKey',
    'AuditLogEntityType',
    'AuditLogEvent',
    'ChannelFlag',
    'ChannelType',
    'DefaultMessageNotificationLevel',
    'ExplicitContentFilterLevel',
    'GuildFeature',
    'IntegrationExpireBehavior',
    'InteractionType',
    'MFALevel',
    'MembershipState',
    'MessageActivityType',
    'MessageFlag',
    'MessageType',
    'NSFWLevel',
    'OverwriteType',
    'Permission',
    'PremiumTier',
    'PremiumType',
    'StickerFormatType',
    'SystemChannelFlag',
    'ThreadMemberFlag',
    'UserFlag',
    'VerificationLevel',
    'VideoQualityMode',
    'WebhookType',
)


class AuditLogEvent(IntegerEnum):
    GUILD_UPDATE = 1
    CHANNEL_CREATE = 10
    CHANNEL_UPDATE = 11
    CHANNEL_DELETE = 12
    CHANNEL_OVERWRITE_CREATE = 13
    CHANNEL_OVERWRITE_UPDATE = 14
    CHANNEL_OVERWRITE_DELETE = 15
    MEMBER_KICK = 20
    MEMBER_PRUNE = 21
    MEMBER_BAN_ADD = 22
    MEMBER_BAN_REMOVE = 23
    MEMBER_UPDATE = 24
    MEMBER_ROLE_UPDATE = 25
    MEMBER_MOVE = 26
    MEMBER_DISCONNECT = 27
    BOT_ADD = 28
    ROLE_CREATE = 30
    ROLE_UPDATE = 31
    ROLE_DELETE = 32
    INVITE_CREATE = 40
    INVITE_UPDATE = 41
    INVITE_DELETE = 42
    WEBHOOK_CREATE = 50
    WEBHOOK_UPDATE = 51
    WEBHOOK_DELETE = 52
    EMOJI_CREATE = 60
    EMOJI_UPDATE = 61
    EMOJI_DELETE = 62
    MESSAGE_DELETE = 72
    MESSAGE_BULK_DELETE = 73
    MESSAGE_PIN = 74
    MESSAGE_UNPIN = 75
    INTEGRATION_CREATE = 80
    INTEGRATION_UPDATE = 81
    INTEGRATION_DELETE = 82


class AuditLogEntityType(StringEnum):
    # ? integers, but sent as strings in audit entry info
    ROLE = '0'
    MEMBER = '1'


class AuditLogChangeKey(StringEnum):
    NAME = 'name'
    DESCRIPTION = 'description'
    ICON_HASH = 'icon_hash'
    SPLASH_HASH = 'splash_hash'
    DISCOVERY_SPLASH_HASH = 'discovery_splash_hash'
    BANNER_HASH = 'banner_hash'
    OWNER_ID = 'owner_id'
    REGION = 'region'
    PREFERRED_LOCALE = 'preferred_locale'
    AFK_CHANNEL_ID = 'afk_channel_id'
    AFK_TIMEOUT = 'afk_timeout'
    RULES_CHANNEL_ID = 'rules_channel_id'
    PUBLIC_UPDATES_CHANNEL_ID = 'public_updates_channel_id'
    MFA_LEVEL = 'mfa_level'
    VERIFICATION_LEVEL = 'verification_level'
    EXPLICIT_CONTENT_FILTER = 'explicit_content_filter'
    DEFAULT_MESSAGE_NOTIFICATIONS = 'default_message_notifications'
    VANITY_URL_CODE = 'vanity_url_code'
    ROLE_ADD = '$add'
    ROLE_REMOVE = '$remove'
    PRUNE_DELETE_DAYS = 'prune_delete_days'
    WIDGET_ENABLED = 'widget_enabled'
    WIDGET_CHANNEL_ID = 'widget_channel_id'
    SYSTEM_CHANNEL_ID = 'system_channel_id'
    POSITION = 'position'
    TOPIC = 'topic'
    BITRATE = 'bitrate'
    PERMISSION_OVERWRITES = 'permission_overwrites'
    NSFW = 'nsfw'
    APPLICATION_ID = 'application_id'
    RATE_LIMIT_PER_USER = 'rate_limit_per_user'
    PERMISSIONS = 'permissions'
    COLOR = 'color'
    HOIST = 'hoist'
    MENTIONABLE = 'mentionable'
    ALLOW = 'allow'
    DENY = 'deny'
    CODE = 'code'
    CHANNEL_ID = 'channel_id'
    INVITER_ID = 'inviter_id'
    MAX_USES = 'max_uses'
    USES = 'uses'
    MAX_AGE = 'max_age'
    TEMPORARY = 'temporary'
    DEAF = 'deaf'
    MUTE = 'mute'
    NICK = 'nick'
    AVATAR_HASH = 'avatar_hash'
    ID = 'id'
    TYPE = 'type'
    ENABLE_EMOTICONS = 'enable_emoticons'
    EXPIRE_BEHAVIOR = 'expire_behavior'
    EXPIRE_GRACE_PERIOD = 'expire_grace_period'
    USER_LIMIT = 'user_limit'
    PRIVACY_LEVEL = 'privacy_level'


class ChannelType(IntegerEnum):
    GUILD_TEXT = 0
    DM = 1
    GUILD_VOICE = 2
    GROUP_DM = 3
    GUILD_CATEGORY = 4
    GUILD_ANNOUNCEMENT = 5
    GUILD_STORE = 6
    ANNOUNCEMENT_THREAD = 10
    PUBLIC_THREAD = 11
    PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15
    GUILD_MEDIA = 16


class VideoQualityMode(IntegerEnum):
    AUTO = 1
    FULL = 2


class OverwriteType(IntegerEnum):
    ROLE = 0
    MEMBER = 1


class ChannelFlag(BitFlags):
    NONE = 0
    PINNED = 1 << 1
    REQUIRE_TAG = 1 << 4
    HIDE_MEDIA_DOWNLOAD_OPTIONS = 1 << 15


class ThreadMemberFlag(BitFlags):
    NONE = 0
    HAS_INTERACTED = 1 << 0
    ALL_MESSAGES = 1 << 1
    ONLY_MENTIONS = 1 << 2
    NO_MESSAGES = 1 << 3


class MessageType(IntegerEnum):
    DEFAULT = 0
    RECIPIENT_ADD = 1
    RECIPIENT_REMOVE = 2
    CALL = 3
    CHANNEL_NAME_CHANGE = 4
    CHANNEL_ICON_CHANGE = 5
    CHANNEL_PINNED_MESSAGE = 6
    USER_JOIN = 7
    GUILD_BOOST = 8
    GUILD_BOOST_TIER_1 = 9
    GUILD_BOOST_TIER_2 = 10
    GUILD_BOOST_TIER_3 = 11
    CHANNEL_FOLLOW_ADD = 12
    GUILD_DISCOVERY_DISQUALIFIED = 14
    GUILD_DISCOVERY_REQUALIFIED = 15
    GUILD_DISCOVERY_GRACE_PERIOD_INITIAL_WARNING = 16
    GUILD_DISCOVERY_GRACE_PERIOD_FINAL_WARNING = 17
    THREAD_CREATED = 18
    REPLY = 19
    CHAT_INPUT_COMMAND = 20
    THREAD_STARTER_MESSAGE = 21
    GUILD_INVITE_REMINDER = 22
    CONTEXT_MENU_COMMAND = 23


class MessageActivityType(IntegerEnum):
    JOIN = 1
    SPECTATE = 2
    LISTEN = 3
    JOIN_REQUEST = 5


class MessageFlag(BitFlags):
    NONE = 0
    CROSSPOSTED = 1 << 0
    IS_CROSSPOST = 1 << 1
    SUPPRESS_EMBEDS = 1 << 2
    SOURCE_MESSAGE_DELETED = 1 << 3
    URGENT = 1 << 4
    HAS_THREAD = 1 << 5
    EPHEMERAL = 1 << 6
    LOADING = 1 << 7
    FAILED_TO_MENTION_SOME_ROLES_IN_THREAD = 1 << 8
    SUPPRESS_NOTIFICATIONS = 1 << 12
    IS_VOICE_MESSAGE = 1 << 13


class AttachmentFlag(BitFlags):
    NONE = 0
    IS_REMIX = 1 << 2


class AllowedMentionType(StringEnum):
    ROLES = 'roles'
    USERS = 'users'
    EVERYONE = 'everyone'


class InteractionType(IntegerEnum):
    PING = 1
    APPLICATION_COMMAND = 2
    MESSAGE_COMPONENT = 3
    APPLICATION_COMMAND_AUTOCOMPLETE = 4
    MODAL_SUBMIT = 5


class StickerFormatType(IntegerEnum):
    PNG = 1
    APNG = 2
    LOTTIE = 3
    GIF = 4

    @property
    def file_extension(self) -> str:
        match self:
            case StickerFormatType.PNG | StickerFormatType.APNG:
                return 'png'
            case StickerFormatType.LOTTIE:
                return 'json'
            case StickerFormatType.GIF:
                return 'gif'
            case _:
                raise ValueError('Invalid sticker format type')


class ApplicationCommandType(IntegerEnum):
    CHAT_INPUT = 1
    USER = 2
    MESSAGE = 3


class ApplicationCommandOptionType(IntegerEnum):
    SUB_COMMAND = 1
    SUB_COMMAND_GROUP = 2
    STRING = 3
    INTEGER = 4
    BOOLEAN = 5
    USER = 6
    CHANNEL = 7
    ROLE = 8
    MENTIONABLE = 9
    NUMBER = 10
    ATTACHMENT = 11


class ApplicationCommandPermissionType(IntegerEnum):
    ROLE = 1
    USER = 2
    CHANNEL = 3


class ApplicationFlag(BitFlags):
    NONE = 0
    GATEWAY_PRESENCE = 1 << 12
    GATEWAY_PRESENCE_LIMITED = 1 << 13
    GATEWAY_GUILD_MEMBERS = 1 << 14
    GATEWAY_GUILD_MEMBERS_LIMITED = 1 << 15
    VERIFICATION_PENDING_GUILD_LIMIT = 1 << 16
    EMBEDDED = 1 << 17
    GATEWAY_MESSAGE_CONTENT = 1 << 18
    GATEWAY_MESSAGE_CONTENT_LIMITED = 1 << 19
    APPLICATION_COMMAND_BADGE = 1 << 23


class MembershipState(IntegerEnum):
    INVITED = 1
    ACCEPTED = 2


class WebhookType(IntegerEnum):
    INCOMING = 1
    CHANNEL_FOLLOWER = 2
    APPLICATION = 3


class PremiumType(IntegerEnum):
    NONE = 0
    NITRO_CLASSIC = 1
    NITRO = 2
    NITRO_BASIC = 3


class UserFlag(BitFlags):
    NONE = 0
    STAFF = 1 << 0
    PARTNER = 1 << 1
    HYPESQUAD = 1 << 2
    BUG_HUNTER_LEVEL_1 = 1 << 3
    HYPESQUAD_ONLINE_HOUSE_1 = 1 << 6
    HYPESQUAD_ONLINE_HOUSE_2 = 1 << 7
    HYPESQUAD_ONLINE_HOUSE_3 = 1 << 8
    PREMIUM_EARLY_SUPPORTER = 1 << 9
    TEAM_PSEUDO_USER = 1 << 10
    BUG_HUNTER_LEVEL_2 = 1 << 14
    VERIFIED_BOT = 1 << 16
    VERIFIED_DEVELOPER = 1 << 17
    CERTIFIED_MODERATOR = 1 << 18
    BOT_HTTP_INTERACTIONS = 1 << 19
    ACTIVE_DEVELOPER = 1 << 22


class Permission(StringBitFlags):
    NONE = 0
    CREATE_INSTANT_INVITE = 1 << 0
    KICK_MEMBERS = 1 << 1
    BAN_MEMBERS = 1 << 2
    ADMINISTRATOR = 1 << 3
    MANAGE_CHANNELS = 1 << 4
    MANAGE_GUILD = 1 << 5
    ADD_REACTIONS = 1 << 6
    VIEW_AUDIT_LOG = 1 << 7
    PRIORITY_SPEAKER = 1 << 8
    STREAM = 1 << 9
    VIEW_CHANNEL = 1 << 10
    SEND_MESSAGES = 1 << 11
    SEND_TTS_MESSAGES = 1 << 12
    MANAGE_MESSAGES = 1 << 13
    EMBED_LINKS = 1 << 14
    ATTACH_FILES = 1 << 15
    READ_MESSAGE_HISTORY = 1 << 16
    MENTION_EVERYONE = 1 << 17
    USE_EXTERNAL_EMOJIS = 1 << 18
    VIEW_GUILD_INSIGHTS = 1 << 19
    CONNECT = 1 << 20
    SPEAK = 1 << 21
    MUTE_MEMBERS = 1 << 22
    DEAFEN_MEMBERS = 1 << 23
    MOVE_MEMBERS = 1 << 24
    USE_VAD = 1 << 25
    CHANGE_NICKNAME = 1 << 26
    MANAGE_NICKNAMES = 1 << 27
    MANAGE_ROLES = 1 << 28
    MANAGE_WEBHOOKS = 1 << 29
    MANAGE_GUILD_EXPRESSIONS = 1 << 30
    USE_APPLICATION_COMMANDS = 1 << 31
    REQUEST_TO_SPEAK = 1 << 32
    MANAGE_EVENTS = 1 << 33
    MANAGE_THREADS = 1 << 34
    CREATE_PUBLIC_THREADS = 1 << 35
    CREATE_PRIVATE_THREADS = 1 << 36
    USE_EXTERNAL_STICKERS = 1 << 37
    SEND_MESSAGES_IN_THREADS = 1 << 38
    USE_EMBEDDED_ACTIVITIES = 1 << 39
    MODERATE_MEMBERS = 1 << 40

    def with_overwrite(self, allow: int, deny: int) -> Permission:
        return self.__class__((self._value_ & ~int(deny)) | int(allow))


class VerificationLevel(IntegerEnum):
    NONE = 0
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    VERY_HIGH = 4


class DefaultMessageNotificationLevel(IntegerEnum):
    ALL_MESSAGES = 0
    ONLY_MENTIONS = 1


class ExplicitContentFilterLevel(IntegerEnum):
    DISABLED = 0
    MEMBERS_WITHOUT_ROLES = 1
    ALL_MEMBERS = 2


class GuildFeature(StringEnum):
    ANIMATED_BANNER = 'ANIMATED_BANNER'
    ANIMATED_ICON = 'ANIMATED_ICON'
    AUTO_MODERATION = 'AUTO_MODERATION'
    BANNER = 'BANNER'
    COMMERCE = 'COMMERCE'
    COMMUNITY = 'COMMUNITY'
    DEVELOPER_SUPPORT_SERVER = 'DEVELOPER_SUPPORT_SERVER'
    DISCOVERABLE = 'DISCOVERABLE'
    FEATURABLE = 'FEATURABLE'
    INVITES_DISABLED = 'INVITES_DISABLED'
    INVITE_SPLASH = 'INVITE_SPLASH'
    MEMBER_VERIFICATION_GATE_ENABLED = 'MEMBER_VERIFICATION_GATE_ENABLED'
    MORE_STICKERS = 'MORE_STICKERS'
    NEWS = 'NEWS'
    PARTNERED = 'PARTNERED'
    PREVIEW_ENABLED = 'PREVIEW_ENABLED'
    ROLE_ICONS = 'ROLE_ICONS'
    TICKETED_EVENTS_ENABLED = 'TICKETED_EVENTS_ENABLED'
    VANITY_URL = 'VANITY_URL'
    VERIFIED = 'VERIFIED'
    VIP_REGIONS = 'VIP_REGIONS'
    WELCOME_SCREEN_ENABLED = 'WELCOME_SCREEN_ENABLED'


class MFALevel(IntegerEnum):
    NONE = 0
    ELEVATED = 1


class SystemChannelFlag(BitFlags):
    NONE = 0
    SUPPRESS_JOIN_NOTIFICATIONS = 1 << 0
    SUPPRESS_PREMIUM_SUBSCRIPTIONS = 1 << 1
    SUPPRESS_GUILD_REMINDER_NOTIFICATIONS = 1 << 2
    SUPPRESS_JOIN_NOTIFICATION_REPLIES = 1 << 3


class PremiumTier(IntegerEnum):
    NONE = 0
    TIER_1 = 1
    TIER_2 = 2
    TIER_3 = 3

    @property
    def emoji_limit(self) -> int:
        match self:
            case PremiumTier.NONE:
                return 50
            case PremiumTier.TIER_1:
                return 100
            case PremiumTier.TIER_2:
                return 150
            case PremiumTier.TIER_3:
                return 250
            case _:
                raise ValueError('Invalid premium tier')

    @property
    def filesize_limit(self) -> int:
        match self:
            case PremiumTier.NONE | PremiumTier.TIER_1:
                return 26_214_400
            case PremiumTier.TIER_2:
                return 52_428_800
            case PremiumTier.TIER_3:
                return 104_857_600
            case _:
                raise ValueError('Invalid premium tier')


class NSFWLevel(IntegerEnum):
    DEFAULT = 0
    EXPLICIT = 1
    SAFE = 2
    AGE_RESTRICTED = 3


class IntegrationExpireBehavior(IntegerEnum):
    REMOVE_ROLE = 0
    KICK = 1
