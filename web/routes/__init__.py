"""
API 라우트 패키지

각 기능별 라우터 모듈:
- health: 헬스 체크
- entries: 분개 CRUD
- accounts: 계정과목표
- assets: 고정자산
- reports: 총계정원장/시산표/손익계산서
"""
