"""
Name table from Fyne theme icons to files of the Adwaita icon theme.

Paths are relative to the "Adwaita" directory of the archive. Empty paths are
icons with no Adwaita counterpart chosen yet; they are skipped.
"""

from typing import Dict, FrozenSet

ICONS: Dict[str, str] = {
    "IconNameCancel": "symbolic/ui/window-close-symbolic.svg",
    "IconNameConfirm": "symbolic/actions/object-select-symbolic.svg",
    "IconNameDelete": "symbolic/actions/edit-delete-symbolic.svg",
    "IconNameSearch": "symbolic/actions/edit-find-symbolic.svg",
    "IconNameSearchReplace": "symbolic/actions/edit-find-replace-symbolic.svg",
    "IconNameMenu": "symbolic/actions/open-menu-symbolic.svg",
    "IconNameMenuExpand": "symbolic/ui/pan-end-symbolic.svg",

    "IconNameCheckButton": "symbolic/ui/checkbox-symbolic.svg",
    "IconNameCheckButtonChecked": "symbolic/ui/checkbox-checked-symbolic.svg",
    "IconNameRadioButton": "symbolic/ui/radio-symbolic.svg",
    "IconNameRadioButtonChecked": "symbolic/ui/radio-checked-symbolic.svg",

    "IconNameContentAdd": "symbolic/actions/list-add-symbolic.svg",
    "IconNameContentClear": "symbolic/actions/edit-clear-symbolic.svg",
    "IconNameContentRemove": "symbolic/actions/list-remove-symbolic.svg",
    "IconNameContentCut": "symbolic/actions/edit-cut-symbolic.svg",
    "IconNameContentCopy": "symbolic/actions/edit-copy-symbolic.svg",
    "IconNameContentPaste": "symbolic/actions/edit-paste-symbolic.svg",
    "IconNameContentRedo": "symbolic/actions/edit-redo-symbolic.svg",
    "IconNameContentUndo": "symbolic/actions/edit-undo-symbolic.svg",

    "IconNameColorAchromatic": "",
    "IconNameColorChromatic": "",
    "IconNameColorPalette": "symbolic/categories/applications-graphics-symbolic.svg",

    "IconNameDocument": "symbolic/mimetypes/text-x-generic-symbolic.svg",
    "IconNameDocumentCreate": "symbolic/actions/document-new-symbolic.svg",
    "IconNameDocumentPrint": "symbolic/actions/document-print-symbolic.svg",
    "IconNameDocumentSave": "symbolic/actions/document-save-symbolic.svg",

    "IconNameMoreHorizontal": "symbolic/actions/view-more-horizontal-symbolic.svg",
    "IconNameMoreVertical": "symbolic/actions/view-more-symbolic.svg",

    "IconNameInfo": "symbolic/status/dialog-information-symbolic.svg",
    "IconNameQuestion": "symbolic/status/dialog-question-symbolic.svg",
    "IconNameWarning": "symbolic/status/dialog-warning-symbolic.svg",
    "IconNameError": "symbolic/status/dialog-error-symbolic.svg",

    "IconNameMailAttachment": "symbolic/status/mail-attachment-symbolic.svg",
    "IconNameMailCompose": "symbolic/actions/mail-message-new-symbolic.svg",
    "IconNameMailForward": "symbolic/actions/mail-forward-symbolic.svg",
    "IconNameMailReply": "symbolic/actions/mail-reply-sender-symbolic.svg",
    "IconNameMailReplyAll": "symbolic/actions/mail-reply-all-symbolic.svg",
    "IconNameMailSend": "symbolic/actions/mail-send-symbolic.svg",

    "IconNameMediaMusic": "symbolic/mimetypes/audio-x-generic-symbolic.svg",
    "IconNameMediaPhoto": "symbolic/mimetypes/image-x-generic-symbolic.svg",
    "IconNameMediaVideo": "symbolic/mimetypes/video-x-generic-symbolic.svg",
    "IconNameMediaFastForward": "symbolic/actions/media-seek-forward-symbolic.svg",
    "IconNameMediaFastRewind": "symbolic/actions/media-seek-backward-symbolic.svg",
    "IconNameMediaPause": "symbolic/actions/media-playback-pause-symbolic.svg",
    "IconNameMediaPlay": "symbolic/actions/media-playback-start-symbolic.svg",
    "IconNameMediaRecord": "symbolic/actions/media-record-symbolic.svg",
    "IconNameMediaReplay": "symbolic/actions/media-seek-backward-symbolic.svg",
    "IconNameMediaSkipNext": "symbolic/actions/media-skip-forward-symbolic.svg",
    "IconNameMediaSkipPrevious": "symbolic/actions/media-skip-backward-symbolic.svg",
    "IconNameMediaStop": "symbolic/actions/media-playback-stop-symbolic.svg",

    "IconNameNavigateBack": "symbolic/actions/go-previous-symbolic.svg",
    "IconNameMoveDown": "symbolic/actions/go-down-symbolic.svg",
    "IconNameNavigateNext": "symbolic/actions/go-next-symbolic.svg",
    "IconNameMoveUp": "symbolic/actions/go-up-symbolic.svg",
    "IconNameArrowDropDown": "symbolic/actions/go-down-symbolic.svg",
    "IconNameArrowDropUp": "symbolic/actions/go-up-symbolic.svg",

    "IconNameFile": "scalable/mimetypes/application-x-generic.svg",
    "IconNameFileApplication": "scalable/mimetypes/application-x-executable.svg",
    "IconNameFileAudio": "scalable/mimetypes/audio-x-generic.svg",
    "IconNameFileImage": "scalable/mimetypes/image-x-generic.svg",
    "IconNameFileText": "scalable/mimetypes/text-x-generic.svg",
    "IconNameFileVideo": "scalable/mimetypes/video-x-generic.svg",
    "IconNameFolder": "scalable/places/folder.svg",
    "IconNameFolderNew": "symbolic/actions/folder-new-symbolic.svg",
    "IconNameFolderOpen": "symbolic/status/folder-open-symbolic.svg",
    "IconNameHelp": "symbolic/actions/help-about-symbolic.svg",
    "IconNameHistory": "",
    "IconNameHome": "symbolic/places/user-home-symbolic.svg",
    "IconNameSettings": "symbolic/categories/applications-system-symbolic.svg",

    "IconNameViewFullScreen": "symbolic/actions/view-fullscreen-symbolic.svg",
    "IconNameViewRefresh": "symbolic/actions/view-refresh-symbolic.svg",
    "IconNameViewRestore": "symbolic/actions/view-restore-symbolic.svg",
    "IconNameViewZoomFit": "symbolic/actions/zoom-fit-best-symbolic.svg",
    "IconNameViewZoomIn": "symbolic/actions/zoom-in-symbolic.svg",
    "IconNameViewZoomOut": "symbolic/actions/zoom-out-symbolic.svg",

    "IconNameVisibility": "symbolic/actions/view-reveal-symbolic.svg",
    "IconNameVisibilityOff": "symbolic/actions/view-conceal-symbolic.svg",

    "IconNameVolumeDown": "symbolic/status/audio-volume-low-symbolic.svg",
    "IconNameVolumeMute": "symbolic/status/audio-volume-muted-symbolic.svg",
    "IconNameVolumeUp": "symbolic/status/audio-volume-high-symbolic.svg",

    "IconNameDownload": "symbolic/places/folder-download-symbolic.svg",
    "IconNameComputer": "symbolic/devices/computer-symbolic.svg",
    "IconNameStorage": "symbolic/devices/drive-harddisk-symbolic.svg",
    "IconNameUpload": "symbolic/actions/send-to-symbolic.svg",

    "IconNameAccount": "symbolic/status/avatar-default-symbolic.svg",
    "IconNameLogin": "",
    "IconNameLogout": "symbolic/actions/system-log-out-symbolic.svg",

    "IconNameList": "symbolic/actions/view-list-symbolic.svg",
    "IconNameGrid": "symbolic/actions/view-grid-symbolic.svg",
}

# SVGs the Fyne rasterizer cannot draw; they are bundled as PNG instead
FORCE_PNG: FrozenSet[str] = frozenset(
    [
        "IconNameFileAudio",
        "IconNameFileApplication",
    ]
)
