"""
Domain Layer

包含應用程序的核心領域模型和業務邏輯：

- device: 設備清冊的實體、存儲庫、服務與 API
- common: 各領域共用的例外
"""
