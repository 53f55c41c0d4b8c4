"""Output languages and the localized message catalog."""

from __future__ import annotations

from enum import Enum, auto


class Language(Enum):
    """Language used for human-readable output."""

    EN = "en"
    JA = "ja"


class Msg(Enum):
    """Identifiers of every localized message."""

    ROOT_MISSING = auto()
    ROOT_LABEL = auto()
    STATUS_DONE = auto()
    STATUS_FAILED = auto()
    TASK_SCAN_CLEANUP = auto()
    TASK_SCAN_UNUSED_LIBRARIES = auto()
    TASK_SCAN_UNUSED_ASSETS = auto()
    TASK_CLEAN_TARGETS = auto()
    TASK_SCAN_DUPLICATE_MODS = auto()
    TASK_SCAN_WORLDS = auto()
    TASK_SCAN_USAGE = auto()
    CONFIG_PROMPT_DEFAULT_LANGUAGE = auto()
    CONFIG_READ_SELECTION_FAILED = auto()
    SELECT_INSTANCES_PROMPT = auto()
    SELECT_INSTANCES_READ_FAILED = auto()
    CLEAN_CONFIRM_PROMPT = auto()
    CLEAN_CONFIRM_READ_FAILED = auto()
    CLEAN_PATH_OUTSIDE_ROOT = auto()
    CLEAN_SCHEDULED = auto()
    CLEAN_MOVED_TO_TRASH = auto()
    CLEAN_FAILED_PREFIX = auto()
    CLEAN_SELECT_PROMPT = auto()
    CLEAN_SELECT_READ_FAILED = auto()
    SCAN_TITLE = auto()
    SCAN_SAFE_TARGETS = auto()
    SCAN_SAFE_TOTAL = auto()
    SCAN_UNUSED_LIBRARIES = auto()
    SCAN_UNUSED_LIBRARIES_TOTAL = auto()
    SCAN_UNUSED_ASSETS = auto()
    SCAN_UNUSED_ASSETS_TOTAL = auto()
    SCAN_NONE = auto()
    PAGER_HELP = auto()
    NO_DUPLICATE_MODS = auto()
    DUPLICATE_MODS = auto()
    DUPLICATE_GROUPS = auto()
    POTENTIAL_RECLAIMABLE = auto()
    NO_WORLDS_DETECTED = auto()
    WORLDS = auto()
    TOTAL_WORLD_SIZE = auto()
    INSTANCE_USAGE = auto()
    TOTAL_INSTANCE_SIZE = auto()
    CLEANUP_RESULT = auto()
    DRY_RUN_RECLAIMABLE = auto()
    CLEANED = auto()


_CATALOG: dict[Msg, tuple[str, str]] = {
    Msg.ROOT_MISSING: ("PrismLauncher root does not exist", "PrismLauncher root が存在しません"),
    Msg.ROOT_LABEL: ("root", "ルート"),
    Msg.STATUS_DONE: ("done", "完了"),
    Msg.STATUS_FAILED: ("failed", "失敗"),
    Msg.TASK_SCAN_CLEANUP: ("Scanning cleanup targets", "クリーン対象をスキャン中"),
    Msg.TASK_SCAN_UNUSED_LIBRARIES: ("Scanning unused libraries", "未使用 libraries をスキャン中"),
    Msg.TASK_SCAN_UNUSED_ASSETS: ("Scanning unused assets", "未使用 assets をスキャン中"),
    Msg.TASK_CLEAN_TARGETS: ("Cleaning targets", "対象を削除中"),
    Msg.TASK_SCAN_DUPLICATE_MODS: ("Scanning duplicate mods", "重複 mod をスキャン中"),
    Msg.TASK_SCAN_WORLDS: ("Scanning worlds", "ワールドをスキャン中"),
    Msg.TASK_SCAN_USAGE: ("Scanning instance usage", "インスタンス使用量をスキャン中"),
    Msg.CONFIG_PROMPT_DEFAULT_LANGUAGE: ("Default output language", "既定の出力言語"),
    Msg.CONFIG_READ_SELECTION_FAILED: ("failed to read selection", "選択の読み取りに失敗しました"),
    Msg.SELECT_INSTANCES_PROMPT: (
        "Choose instances to scan",
        "スキャン対象のインスタンスを選択してください",
    ),
    Msg.SELECT_INSTANCES_READ_FAILED: (
        "failed to read instance selection",
        "インスタンス選択の読み取りに失敗しました",
    ),
    Msg.CLEAN_CONFIRM_PROMPT: (
        "Proceed with cleanup? (targets are moved to trash)",
        "削除を実行しますか？(対象はゴミ箱へ移動)",
    ),
    Msg.CLEAN_CONFIRM_READ_FAILED: (
        "failed to read confirmation input",
        "確認入力の読み取りに失敗しました",
    ),
    Msg.CLEAN_PATH_OUTSIDE_ROOT: ("path is outside PrismLauncher root", "root外のパスは処理不可"),
    Msg.CLEAN_SCHEDULED: ("scheduled for deletion", "削除予定"),
    Msg.CLEAN_MOVED_TO_TRASH: ("moved to trash", "ゴミ箱へ移動"),
    Msg.CLEAN_FAILED_PREFIX: ("failed", "削除失敗"),
    Msg.CLEAN_SELECT_PROMPT: ("Select cleanup targets", "削除対象を選択してください"),
    Msg.CLEAN_SELECT_READ_FAILED: (
        "failed to read cleanup selection",
        "削除対象の選択読み取りに失敗しました",
    ),
    Msg.SCAN_TITLE: ("PrismLauncher Scan Report", "PrismLauncher スキャンレポート"),
    Msg.SCAN_SAFE_TARGETS: ("[Safe cleanup targets]", "[安全に削除できる対象]"),
    Msg.SCAN_SAFE_TOTAL: ("Safe reclaimable total", "安全対象の合計"),
    Msg.SCAN_UNUSED_LIBRARIES: (
        "[Potentially unused libraries]",
        "[未使用の可能性がある libraries]",
    ),
    Msg.SCAN_UNUSED_LIBRARIES_TOTAL: ("Unused libraries total", "未使用 libraries の合計"),
    Msg.SCAN_UNUSED_ASSETS: ("[Potentially unused assets]", "[未使用の可能性がある assets]"),
    Msg.SCAN_UNUSED_ASSETS_TOTAL: ("Unused assets total", "未使用 assets の合計"),
    Msg.SCAN_NONE: ("(none)", "(候補なし)"),
    Msg.PAGER_HELP: (
        "Page {page}/{total}  Next: Right/j/l  Prev: Left/h/k  Quit: q/Enter",
        "ページ {page}/{total}  次へ: Right/j/l  前へ: Left/h/k  終了: q/Enter",
    ),
    Msg.NO_DUPLICATE_MODS: ("No duplicate mods found.", "重複 mod は見つかりませんでした。"),
    Msg.DUPLICATE_MODS: ("Duplicate mods:", "重複 mod 一覧:"),
    Msg.DUPLICATE_GROUPS: ("Duplicate groups", "重複グループ数"),
    Msg.POTENTIAL_RECLAIMABLE: ("Potential reclaimable", "削減可能見込み"),
    Msg.NO_WORLDS_DETECTED: (
        "No worlds detected in selected instances.",
        "選択されたインスタンスでワールドは検出されませんでした。",
    ),
    Msg.WORLDS: ("Worlds:", "ワールド一覧:"),
    Msg.TOTAL_WORLD_SIZE: ("Total world size", "ワールド合計サイズ"),
    Msg.INSTANCE_USAGE: ("Instance usage:", "インスタンス使用量:"),
    Msg.TOTAL_INSTANCE_SIZE: ("Total instance size", "インスタンス合計サイズ"),
    Msg.CLEANUP_RESULT: ("Cleanup result:", "削除結果:"),
    Msg.DRY_RUN_RECLAIMABLE: ("Dry-run reclaimable", "dry-run で削減可能"),
    Msg.CLEANED: ("Cleaned", "削除済み"),
}


def text(lang: Language, msg: Msg) -> str:
    """Return the message text for ``msg`` in ``lang``."""
    english, japanese = _CATALOG[msg]
    return japanese if lang is Language.JA else english