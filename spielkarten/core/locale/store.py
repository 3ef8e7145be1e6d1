"""
翻译存储.

定义翻译存储契约 lookup(locale, key) -> Optional[str]，
并提供内存字典实现和基于YAML资源文件的实现.
"""

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Protocol, Union

import yaml

from ..exceptions import LocaleResourceError
from .types import LocaleLike

logger = logging.getLogger(__name__)

DEFAULT_RESOURCE_DIR = Path(__file__).resolve().parent.parent.parent / "resources" / "locales"
CORE_RESOURCE = "core"
RESOURCE_SUFFIX = ".yaml"


class TranslationStore(Protocol):
    """翻译存储契约，未找到时返回None"""

    def lookup(self, locale: LocaleLike, key: str) -> Optional[str]:
        ...


class DictTranslationStore:
    """
    基于内存字典的翻译存储.

    Attributes:
        _translations: 语言标签 -> (翻译键 -> 翻译) 的映射
        _shared: 所有语言共享的翻译，语言自身的翻译优先

    Examples:
        >>> store = DictTranslationStore({"en-US": {"spades-letter": "S"}})
        >>> store.lookup("en-US", "spades-letter")
        'S'
        >>> store.lookup("de", "spades-letter") is None
        True
    """

    def __init__(self, translations: Mapping[str, Mapping[str, str]],
                 shared: Optional[Mapping[str, str]] = None) -> None:
        self._translations: Dict[str, Dict[str, str]] = {
            str(locale): dict(entries) for locale, entries in translations.items()
        }
        self._shared: Dict[str, str] = dict(shared or {})

    def lookup(self, locale: LocaleLike, key: str) -> Optional[str]:
        entries = self._translations.get(str(locale))
        if entries is None:
            return None
        if key in entries:
            return entries[key]
        return self._shared.get(key)

    def locales(self) -> List[str]:
        """返回所有已知的语言标签"""
        return sorted(self._translations)


class YamlTranslationStore:
    """
    基于YAML资源文件的翻译存储.

    每个语言对应目录下的一个"<标签>.yaml"文件，内容为翻译键到字符串的映射.
    core资源(默认"core.yaml")与每个语言合并，语言自身的翻译优先.
    资源在第一次查询某语言时加载并缓存.

    Attributes:
        resource_dir: 资源目录
        core_resource: 共享资源名称，None表示不使用共享资源
    """

    def __init__(self, resource_dir: Union[str, Path, None] = None,
                 core_resource: Optional[str] = CORE_RESOURCE) -> None:
        self.resource_dir = Path(resource_dir) if resource_dir is not None else DEFAULT_RESOURCE_DIR
        self.core_resource = core_resource
        self._cache: Dict[str, Optional[Dict[str, str]]] = {}
        self._core: Optional[Dict[str, str]] = None

        if not self.resource_dir.is_dir():
            raise LocaleResourceError(f"翻译资源目录不存在: {self.resource_dir}")

    def lookup(self, locale: LocaleLike, key: str) -> Optional[str]:
        entries = self._entries_for(str(locale))
        if entries is None:
            return None
        return entries.get(key)

    def available_locales(self) -> List[str]:
        """返回资源目录下所有可用的语言标签(不含共享资源)"""
        return sorted(
            path.stem for path in self.resource_dir.glob(f"*{RESOURCE_SUFFIX}")
            if path.stem != self.core_resource
        )

    def _entries_for(self, tag: str) -> Optional[Dict[str, str]]:
        if tag not in self._cache:
            path = self.resource_dir / f"{tag}{RESOURCE_SUFFIX}"
            if tag == self.core_resource or not path.is_file():
                # 未知语言视为空，由解析器回退到默认语言
                self._cache[tag] = None
            else:
                merged = dict(self._core_entries())
                merged.update(self._load(path))
                self._cache[tag] = merged
                logger.info(f"已加载语言资源 {tag}: {len(merged)} 个翻译键")
        return self._cache[tag]

    def _core_entries(self) -> Dict[str, str]:
        if self._core is None:
            self._core = {}
            if self.core_resource:
                path = self.resource_dir / f"{self.core_resource}{RESOURCE_SUFFIX}"
                if path.is_file():
                    self._core = self._load(path)
        return self._core

    @staticmethod
    def _load(path: Path) -> Dict[str, str]:
        """
        读取并校验单个资源文件.

        Args:
            path: 资源文件路径

        Returns:
            Dict[str, str]: 翻译键到字符串的映射，数值会被转换为字符串

        Raises:
            LocaleResourceError: 当文件无法解析或内容不是键值映射时
        """
        try:
            with path.open(encoding="utf-8") as handle:
                data = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as e:
            raise LocaleResourceError(f"无法读取翻译资源 {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise LocaleResourceError(f"翻译资源必须是键值映射: {path}")

        entries: Dict[str, str] = {}
        for key, value in data.items():
            if not isinstance(key, str):
                raise LocaleResourceError(f"翻译键必须是字符串: {key!r} ({path})")
            if isinstance(value, bool) or not isinstance(value, (str, int, float)):
                raise LocaleResourceError(f"翻译值必须是标量: {key} = {value!r} ({path})")
            entries[key] = str(value)
        return entries
