from .application_command import *
from .application import *
from .audit_log import *
from .base import *
from .channel import *
from .emoji import *
from .enums import *
from .guild import *
from .image import *
from .integration import *
from .message import *
from .role import *
from .team import *
from .user import *
from .webhook import *


__all__ = (
    # application_command.py
    'ApplicationCommand',
    'ApplicationCommandId',
    'ApplicationCommandOption',
    'ApplicationCommandOptionChoice',
    'ApplicationCommandPermission',
    'EditApplicationCommand',
    'EditGuildApplicationCommandPermissions',
    'GuildApplicationCommandPermissions',
    'NewApplicationCommand',
    # application.py
    'Application',
    'ApplicationId',
    # audit_log.py
    'AuditEntryInfo',
    'AuditLog',
    'AuditLogChange',
    'AuditLogEntry',
    'AuditLogEntryId',
    'AuditLogIntegration',
    'AuditLogRole',
    'AuditLogValues',
    # base.py
    'RawBaseModel',
    'RequestModel',
    # channel.py
    'Channel',
    'ChannelEdit',
    'ChannelId',
    'ChannelMention',
    'Overwrite',
    'ThreadMember',
    'ThreadMetadata',
    # emoji.py
    'Emoji',
    'EmojiId',
    # enums.py
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
    # guild.py
    'Guild',
    'GuildId',
    'Member',
    'WelcomeScreen',
    'WelcomeScreenChannel',
    # image.py
    'ANIMATED_FORMATS',
    'CDN_URL',
    'Image',
    'ImageFormat',
    'STATIC_FORMATS',
    # integration.py
    'Integration',
    'IntegrationAccount',
    'IntegrationApplication',
    'IntegrationId',
    # message.py
    'AllowedMentions',
    'Attachment',
    'Embed',
    'EmbedAuthor',
    'EmbedField',
    'EmbedFooter',
    'EmbedImage',
    'EmbedProvider',
    'EmbedThumbnail',
    'EmbedVideo',
    'Message',
    'MessageActivity',
    'MessageId',
    'MessageInteraction',
    'MessageReference',
    'Reaction',
    'StickerItem',
    # role.py
    'Role',
    'RoleId',
    'RoleTags',
    # team.py
    'Team',
    'TeamId',
    'TeamMember',
    # user.py
    'User',
    'UserId',
    # webhook.py
    'SourceGuild',
    'Webhook',
    'WebhookId',
)


# ? to handle circular imports, ids of models that import each other are
# ? only resolvable once every module is loaded
for _name in __all__:
    _model = globals()[_name]
    if isinstance(_model, type) and issubclass(_model, RawBaseModel):
        _model.model_rebuild(force=True)

del _name, _model
