# core/__init__.py
"""
core - cfnav 코어

대화형 선택과 무관한 부분(값 타입, 인코딩, 콘솔 경로 매핑, AWS 조회)을
포함하는 최상위 패키지입니다.

아키텍처:
    core/
    ├── aws/            # boto3 세션/클라이언트 헬퍼
    ├── stacks/         # 리소스 코덱, 콘솔 경로 매핑, CloudFormation 조회
    ├── config.py       # 중앙 설정 관리
    └── exceptions.py   # 통합 예외 계층

Usage:
    from core.stacks import decode_resource, resolve_console_path

    resource = decode_resource("my-func (AWS::Lambda::Function)")
    resolve_console_path(resource)  # "lambda/home#/functions/my-func?tab=code"
"""
