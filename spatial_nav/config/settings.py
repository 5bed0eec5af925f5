"""
系統配置設置
System Configuration Settings

基於Pydantic的類型安全配置管理：
- 導航參數：直線重疊閾值、僅直線模式、記憶來源
- 日誌參數：級別、格式、文件輪轉
- API服務參數
"""

from typing import Optional, List, Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path
from functools import lru_cache

class NavigationSettings(BaseSettings):
    """空間導航配置（核心算法配置）"""
    
    # 對角候選提升為直線候選所需的重疊比例
    straight_overlap_threshold: float = Field(
        default=0.5, ge=0.0, le=1.0, description="直線重疊閾值（0~1）"
    )
    straight_only: bool = Field(default=False, description="僅考慮直線方向的候選")
    remember_source: bool = Field(default=False, description="反向移動時優先回到來源元素")
    
    model_config = SettingsConfigDict(env_prefix="NAV_", case_sensitive=False)

class LoggingSettings(BaseSettings):
    """日誌配置"""
    
    # 日誌級別
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="日誌級別"
    )
    format: Literal["text", "json"] = Field(default="text", description="日誌格式")
    
    # 日誌文件
    file_path: Optional[Path] = Field(default=None, description="日誌文件路徑")
    rotation: str = Field(default="1 week", description="日誌輪轉")
    retention: str = Field(default="30 days", description="日誌保留時間")
    
    model_config = SettingsConfigDict(env_prefix="LOG_", case_sensitive=False)

class APISettings(BaseSettings):
    """API配置"""
    
    host: str = Field(default="0.0.0.0", description="主機地址")
    port: int = Field(default=8000, description="端口號")
    debug: bool = Field(default=False, description="調試模式")
    
    # CORS配置
    allowed_origins: List[str] = Field(
        default=["http://localhost:3000"], description="CORS允許的源"
    )
    
    model_config = SettingsConfigDict(env_prefix="API_", case_sensitive=False)

class Settings(BaseSettings):
    """主配置類，包含所有子配置"""
    
    navigation: NavigationSettings = Field(default_factory=NavigationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    api: APISettings = Field(default_factory=APISettings)
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    
    def create_directories(self) -> None:
        """創建必要的目錄"""
        if self.logging.file_path:
            self.logging.file_path.parent.mkdir(parents=True, exist_ok=True)

@lru_cache()
def get_settings() -> Settings:
    """
    獲取配置實例（單例模式）
    
    Returns:
        Settings: 配置實例
    """
    settings = Settings()
    settings.create_directories()
    return settings

def get_navigation_defaults() -> dict:
    """獲取導航默認參數"""
    settings = get_settings()
    return {
        "straight_overlap_threshold": settings.navigation.straight_overlap_threshold,
        "straight_only": settings.navigation.straight_only,
        "remember_source": settings.navigation.remember_source,
    }
